"""Scored checks that exercise the tree map and report partial scores.

Each section groups checks into stages worth a number of points.  A stage
fails as soon as one of its checks raises :class:`CheckFailed`, and the
rest of the section is then skipped.  Selecting a single stage by its id
stops the whole run with ``SUCCESS`` once that stage passes.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, TextIO, Tuple

from bstmap.treemap import Pair, TreeMap, TreeNode, minimum

TOTAL_SCORE = 70
ALL_TESTS = -1


@dataclass
class Word:
    """A numbered word stored as the value of a tree entry."""

    id: int
    word: str


class CheckFailed(Exception):
    """Raised by a check whose expectation does not hold."""


class _Reporter:
    def __init__(self, out: TextIO) -> None:
        self.out = out

    def line(self, text: str) -> None:
        print(text, file=self.out)

    def ok(self, message: str) -> None:
        self.line(f"   [OK] {message}")

    def failed(self, message: str) -> None:
        self.line(f"   [FAILED] {message}")

    def info(self, message: str) -> None:
        self.line(f"   [ INFO ] {message}")


Check = Callable[[Optional[TreeMap], Any], None]
Stage = Tuple[Sequence[Check], int, Optional[int]]


def lower_than_int(key1: int, key2: int) -> bool:
    """Order integers numerically."""
    return key1 < key2


def _node(word: Word) -> TreeNode:
    return TreeNode.create(word.id, word)


def _attach_left(parent: TreeNode, word: Word) -> TreeNode:
    parent.left = _node(word)
    parent.left.parent = parent
    return parent.left


def _attach_right(parent: TreeNode, word: Word) -> TreeNode:
    parent.right = _node(word)
    parent.right.parent = parent
    return parent.right


def initialize_tree() -> TreeMap:
    """Build the four-node sample tree the checks start from."""
    tree = TreeMap(lower_than_int)
    tree.root = _node(Word(5239, "auto"))
    right = _attach_right(tree.root, Word(8213, "rayo"))
    _attach_left(right, Word(6980, "hoja"))
    _attach_left(tree.root, Word(1273, "reto"))
    return tree


def _fresh_tree(reporter: _Reporter) -> TreeMap:
    reporter.info("inicializando el arbol...")
    return initialize_tree()


def _expect(condition: Any, message: str) -> None:
    if not condition:
        raise CheckFailed(message)


def _word_id(pair: Optional[Pair]) -> Optional[int]:
    return None if pair is None else pair.value.id


def _check_create(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    created = TreeMap(lower_than_int)
    reporter.ok("createTreeMap retorna un objeto")
    _expect(created.root is None, "root debe ser NULL")
    reporter.ok("root==NULL")
    _expect(
        created.lower_than is lower_than_int and created.lower_than(10, 15),
        "la funcion lower_than no fue guardada de forma correcta",
    )
    reporter.ok("Funcion de comparcion inicializada correctamente")


def _search_check(
    key: int, locate: Callable[[TreeMap], Optional[TreeNode]], current_message: str
) -> Check:
    def check(tree: Optional[TreeMap], reporter: _Reporter) -> None:
        pair = tree.search(key)
        _expect(_word_id(pair) == key, f"no encuentra dato con clave {key}")
        reporter.ok(f"encuentra dato con clave {key}")
        _expect(tree.current is locate(tree), current_message)
        reporter.ok("current actualizado correctamente")

    return check


def _check_search_missing(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    key = 7010
    _expect(tree.search(key) is None, f"retorna dato y clave no existe ({key})")
    reporter.ok(f"retorna NULL: search(key={key})")


def _check_insert_repeated(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    word = Word(1273, "repetido")
    tree.insert(word.id, word)
    left = tree.root.left
    _expect(left.left is None and left.right is None, "se inserta dato repetido")
    reporter.ok("no inserta dato repetido")


def _check_insert_new(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    tree = _fresh_tree(reporter)
    word = Word(900, "maicol")
    reporter.info("insertando dato con clave 900")
    tree.insert(word.id, word)

    node = tree.root.left.left
    _expect(
        node is not None and node.pair.value is word,
        "dato insertado no se encuentra en root->left->left",
    )
    reporter.ok("dato insertado correctamente")
    _expect(node.pair.key == word.id, "clave de dato no se guarda correctamente")
    _expect(node.parent is tree.root.left, "no se inicializa el padre del nuevo nodo")
    _expect(tree.current is node, "no se actualiza el current")
    reporter.ok("current actualizado correctamente")


def _check_minimum(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    tree = _fresh_tree(reporter)
    node = minimum(tree.root)
    _expect(
        node.pair.key == 1273,
        f"minimum retorna nodo con clave {node.pair.key} (deberia retornar 1273)",
    )
    reporter.ok("minimum retorna el nodo con clave 1273")

    _expect(
        minimum(tree.root.left) is tree.root.left,
        "minimum(root->left) no retorna el nodo 1273",
    )

    reporter.info("agregando nodo con clave 100")
    _attach_left(tree.root.left, Word(100, "first_word"))
    node = minimum(tree.root)
    _expect(
        node.pair.key == 100,
        f"minimum retorna nodo con clave {node.pair.key} (deberia retornar 100)",
    )
    reporter.ok("minimum retorna el nodo con clave 100")


def _check_erase_leaf(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    tree = _fresh_tree(reporter)
    reporter.info("eliminando dato con clave 1273 (nodo sin hijos)")
    tree.erase(1273)
    _expect(
        tree.root.left is None,
        "el dato no se elimino correctamente: tree->root->left != NULL",
    )
    reporter.ok("dato eliminado correctamente")


def _check_erase_one_child(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    tree = _fresh_tree(reporter)
    reporter.info("eliminando dato con clave 8213 (nodo con un hijo)")
    tree.erase(8213)
    _expect(
        tree.root.right.pair.key == 6980,
        "el dato no se elimino correctamente root->right!=6980",
    )
    _expect(tree.root.right.parent is tree.root, "falta actualizar el parent de nodo 6980")
    reporter.ok("dato eliminado correctamente")


def _check_erase_two_children(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    tree = _fresh_tree(reporter)
    reporter.info("eliminando dato con clave 5239 (nodo con dos hijos)")
    tree.erase(5239)
    _expect(tree.root.pair.key == 6980, "el dato no se elimino correctamente root!=6980")
    _expect(
        tree.root.right.pair.key == 8213,
        "el dato no se elimino correctamente root->right!=8213",
    )
    reporter.ok("dato eliminado correctamente")


def _check_first(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    pair = tree.first()
    _expect(pair is not None, "first retorna NULL")
    _expect(_word_id(pair) == 1273, "first no retorna nodo 1273")
    reporter.ok("first retorna nodo 1273")


def _check_first_after_insert(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    tree = _fresh_tree(reporter)
    reporter.info("agregando nodo con clave 100")
    _attach_left(tree.root.left, Word(100, "first_word"))
    _expect(_word_id(tree.first()) == 100, "first no retorna nodo 100")
    reporter.ok("first retorna nodo 100")


def _tree_with_2000(reporter: _Reporter) -> Tuple[TreeMap, TreeNode]:
    tree = _fresh_tree(reporter)
    reporter.info("agregando nodo con clave 2000")
    node = _attach_right(tree.root.left, Word(2000, "next_word"))
    return tree, node


def _check_next_right_child(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    tree, _ = _tree_with_2000(reporter)
    reporter.info("actualizando current -> nodo 1273")
    tree.current = tree.root.left
    pair = tree.next()
    _expect(pair is not None, "next retorna NULL")
    _expect(_word_id(pair) == 2000, "next no retorna nodo 2000")
    reporter.ok("next retorna nodo 2000")


def _check_next_to_end(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    tree = _fresh_tree(reporter)
    reporter.info("actualizando current -> root")
    tree.current = tree.root
    for expected in (6980, 8213):
        _expect(_word_id(tree.next()) == expected, f"next no retorna nodo {expected}")
        reporter.ok(f"next retorna nodo {expected}")
    _expect(tree.next() is None, "next != NULL")
    reporter.ok("next retorna NULL")


def _check_next_up_to_parent(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    tree, node = _tree_with_2000(reporter)
    reporter.info("actualizando current -> nodo 2000")
    tree.current = node
    _expect(_word_id(tree.next()) == 5239, "next no retorna nodo 5239")
    reporter.ok("next retorna nodo 5239")


def _upper_bound_check(key: int, expected: int) -> Check:
    def check(tree: Optional[TreeMap], reporter: _Reporter) -> None:
        pair = tree.upper_bound(key)
        _expect(pair is not None, f"upperbound de {key} retorna NULL")
        found = _word_id(pair)
        _expect(found == expected, f"upperbound de {key} retorna {found}")
        reporter.ok(f"upperbound de {key} retorna {found}")

    return check


def _check_upper_bound_past_end(tree: Optional[TreeMap], reporter: _Reporter) -> None:
    key = 8214
    pair = tree.upper_bound(key)
    _expect(pair is None, f"upperbound de {key} retorna {_word_id(pair)}")
    reporter.ok(f"upperbound de {key} retona NULL")


@dataclass(frozen=True)
class Section:
    """A titled run of stages; each stage is (checks, points, stage id)."""

    title: str
    stages: Sequence[Stage]
    max_score: int = 0
    fresh_tree: bool = False

    def selected(self, test_id: int) -> bool:
        """Tell whether this section runs for ``test_id``."""
        ids = [stage_id for _, _, stage_id in self.stages if stage_id is not None]
        return not ids or test_id == ALL_TESTS or test_id in ids

    def run(self, test_id: int, out: TextIO) -> Tuple[int, bool, bool]:
        """Run the stages; return (score, all passed, run finished early)."""
        reporter = _Reporter(out)
        reporter.line(f"\nTest {self.title}...")
        tree = _fresh_tree(reporter) if self.fresh_tree else None

        score = 0
        passed = True
        for checks, points, stage_id in self.stages:
            try:
                for check in checks:
                    check(tree, reporter)
            except CheckFailed as failure:
                reporter.failed(str(failure))
                passed = False
                break
            score += points
            if stage_id is not None and stage_id == test_id:
                reporter.line("SUCCESS")
                return score, True, True

        if self.max_score:
            reporter.line(f"   partial_score: {score}/{self.max_score}")
        return score, passed, False


SECTIONS: Tuple[Section, ...] = (
    Section("createTreeMap", [([_check_create], 5, 0)], 5, fresh_tree=True),
    Section(
        "searchTreeMap",
        [
            (
                [
                    _search_check(5239, lambda t: t.root, "no actualiza current (5329)"),
                    _search_check(
                        8213,
                        lambda t: t.root.right,
                        "no actualiza current correctamente (8213)",
                    ),
                    _search_check(
                        6980,
                        lambda t: t.root.right.left,
                        "no actualiza current correctamente",
                    ),
                    _check_search_missing,
                ],
                10,
                1,
            )
        ],
        10,
        fresh_tree=True,
    ),
    Section(
        "insertTreeMap",
        [([_check_insert_repeated, _check_insert_new], 10, 2)],
        10,
        fresh_tree=True,
    ),
    Section("minimum", [([_check_minimum], 0, None)]),
    Section(
        "removeNode",
        [
            ([_check_erase_leaf], 5, 3),
            ([_check_erase_one_child], 5, 4),
            ([_check_erase_two_children], 5, 5),
        ],
        15,
    ),
    Section(
        "firstTreeMap",
        [([_check_first, _check_first_after_insert], 5, 6)],
        5,
        fresh_tree=True,
    ),
    Section(
        "nextTreeMap",
        [
            ([_check_next_right_child], 5, 7),
            ([_check_next_to_end], 5, 8),
            ([_check_next_up_to_parent], 5, 9),
        ],
        15,
    ),
    Section(
        "upperBound",
        [
            (
                [
                    _upper_bound_check(6980, 6980),
                    _upper_bound_check(6979, 6980),
                    _upper_bound_check(6981, 8213),
                ],
                5,
                10,
            ),
            ([_check_upper_bound_past_end], 5, 11),
        ],
        10,
        fresh_tree=True,
    ),
)


def run_sections(test_id: int, out: Optional[TextIO] = None) -> Tuple[int, bool]:
    """Run the sections selected by ``test_id``; return (score, all passed)."""
    out = sys.stdout if out is None else out
    total = 0
    all_correct = True
    for section in SECTIONS:
        if not section.selected(test_id):
            continue
        score, passed, finished = section.run(test_id, out)
        total += score
        all_correct = all_correct and passed
        if finished:
            break
    return total, all_correct


def _parse_test_id(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run every section, or only the one holding the stage id given."""
    args = list(sys.argv[1:] if argv is None else argv)
    test_id = _parse_test_id(args[0]) if args else ALL_TESTS
    total, _ = run_sections(test_id, sys.stdout)
    if not args:
        print(f"\ntotal_score: {total}/{TOTAL_SCORE}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
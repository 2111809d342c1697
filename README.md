# bstmap

`bstmap` is an ordered map built on a plain (unbalanced) binary search tree.
The order of keys comes from a `lower_than(a, b)` function that you supply,
so any kind of key works as long as you can say when one is smaller than
another. Two keys are equal when neither is lower than the other.

## Installing

```
pip install .
```

To run the tests, install with the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Using the map

```python
from bstmap.treemap import TreeMap

tree = TreeMap(lambda a, b: a < b)
for word in ["saco", "cese", "case", "cosa"]:
    tree.insert(word, word.upper())

pair = tree.search("cosa")        # Pair(key="cosa", value="COSA"), or None if absent
pair = tree.upper_bound("cat")    # the smallest key not lower than "cat"
tree.erase("saco")                # removing a missing key does nothing

pair = tree.first()               # smallest pair, or None for an empty map
while pair is not None:
    print(pair.key, pair.value)
    pair = tree.next()            # in-order successor of the current node

for pair in tree:                 # the same walk, as an iterator
    print(pair.key)
```

How it behaves:

- Inserting a key that is already present leaves the map unchanged; the
  first value stays.
- `search`, `upper_bound`, `insert`, `first` and `next` move the map's
  `current` node, and `next` continues from it. `next` returns `None` once
  the walk has passed the largest key.
- Iterating over the map with `for` does not move `current`.
- `upper_bound(key)` returns the pair for `key` itself when present,
  otherwise the smallest greater key, or `None` when there is none.
- `remove_node(node)` unlinks a given `TreeNode`; a node with two children
  takes over the pair of its in-order successor.
- `minimum(node)` from `bstmap.treemap` returns the leftmost node below a
  given node and raises `ValueError` when given `None`.

The tree is never rebalanced, so keys inserted in sorted order make it a
linked list and operations take linear time.

## Commands

`bstmap-demo` inserts a fixed list of nine four-letter words and prints
them in sorted order, one per line:

```
bstmap-demo
```

`bstmap-grade` runs built-in checks of the map's operations against a small
fixed tree, reporting each check as `[OK]`, `[FAILED]` or `[ INFO ]`, a
partial score for each scored section and a total out of 70:

```
bstmap-grade
```

Give it a check number from 0 to 11 to run only the section holding that
check (the `minimum` checks always run). It prints `SUCCESS` and stops as
soon as that check passes, and prints no total:

```
bstmap-grade 7
```

The same checks are available from Python through
`bstmap.grader.run_sections(test_id, out)`, which returns the score and
whether every check passed; `-1` runs them all.
# hashviz

Two small tools in one package:

- `hashviz.hashmap.HashMap` is a hash map built from buckets of chained
  entries. You choose the bucket count and the hash function. It has cursors
  over its entries, explicit rehashing and a `debug` dump of every bucket.
- `hashviz.layout` is a force-directed layout for simple graphs. Nodes start
  evenly spaced on a circle. Every node repels every other node, and each edge
  pulls its two endpoints together.

## Installing

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Using the hash map

```python
from hashviz.hashmap import HashMap

m = HashMap(5)
cursor, added = m.insert("Anna", 2)   # added is True
m.insert("Anna", 7)                   # key exists: returns (cursor, False), nothing changes
m["Avery"] = 3                        # inserts, or overwrites an existing value
print(m["Anna"], len(m), m.load_factor, m.bucket_count)

m.rehash(2)
m.debug()                             # prints every bucket chain to stdout

c = m.find("Avery")
if not c.at_end:
    print(c.key, c.value, c.item)

m.discard("Anna")                     # returns False if the key was absent
print(m)                              # {Avery:3}
```

Behaviour worth knowing:

- `HashMap()` starts with 10 buckets and uses Python's `hash`.
  `HashMap(bucket_count, hash_function)` takes any function from key to
  integer, for example `lambda k: (k * 43037 + 52081) % 79229`. A bucket
  count of zero or less raises `ValueError`.
- New entries go to the front of their bucket's chain. The map never rehashes
  by itself. `rehash(n)` redistributes every entry over `n` buckets, and
  `rehash(0)` raises `ValueError`.
- `bucket_count` and `load_factor` are properties. `load_factor` is size
  divided by bucket count.
- `m[key]` and `del m[key]` raise `KeyError` when the key is missing.
  `m.index(key, default)` returns the stored value, inserting `default` first
  when the key is absent.
- Iterating a map yields `(key, value)` pairs, bucket by bucket.
- `clear()` removes every entry and keeps the bucket count.
- `copy()` (and `copy.copy`) returns an independent map with the same
  buckets, chains and hash function.
- Two maps compare equal when they hold the same keys and values, whatever
  their bucket counts. Maps are not hashable.
- `str(m)` gives `{key:value, key:value}`. `debug(stream)` writes to any text
  stream and defaults to standard output.

### Cursors

`hashviz.cursor.Cursor` marks a position in a map. `begin()` gives the first
entry, or the end position when the map is empty. `end()` gives the position
past the last entry. `find(key)` gives the entry for that key, or the end
position.

A cursor has `key`, `value` (assignable, which changes the map) and `item`
properties, and an `at_end` property. Reading `key`, `value` or `item` at the
end position raises `IndexError`. `advance()` moves to the next entry and
returns the same cursor. `copy()` returns an independent cursor at the same
position. Two cursors are equal when they refer to the same entry.

`erase_at(cursor)` removes the entry under the cursor and returns a cursor to
the entry that followed it.

## Demo

```
hashviz-demo
```

This runs a short session against a five-bucket map: four inserts, a rehash
to two buckets, an erase through a cursor and two edits through cursors. It
prints the bucket layout after each step. `hashviz.demo.demo(stream)` does the
same from code and returns the final map.

## Graph layout

A graph file starts with a node count, followed by pairs of node indices, one
pair per edge:

```
4
0 1
1 2
2 3
3 0
```

Reading stops at the first token that is not an integer, and an unpaired
trailing index is ignored. A file with no node count, or a negative count,
raises `ValueError`.

Run the layout:

```
hashviz-layout [graph_file] [seconds]
```

Any argument you leave out is asked for interactively. An unreadable file
asks again. When the time is up, the command prints the final `x y` position
of every node, one node per line.

From code:

```python
from hashviz.layout import load_graph, init_nodes_circle, run_layout

graph = load_graph("square.txt")
init_nodes_circle(graph)
steps = run_layout(graph, 1, on_update=None)
for node in graph.nodes:
    print(node.x, node.y)
```

`run_layout` calls `on_update(graph)` once before the first step and again
after every step. It returns the number of steps taken. The single steps are
also available as `compute_forces(graph, k_repel, k_attract)`, which returns
the x and y displacements, and `move_nodes(graph, delta_x, delta_y)`.

The graph types are `hashviz.graph.Node`, `Edge` and `SimpleGraph`.
`scale_to_window(graph, width, height, radius)` returns the node positions
scaled into a drawing area of the given size, which is 600 × 600 by default.
It keeps a margin of one circle radius on every side.

## What it does not do

The layout has no window and draws nothing. It computes positions, reports
progress through `on_update` and prints the final coordinates.
`scale_to_window` gives the coordinates a drawing would use, but rendering
them is left to the caller.
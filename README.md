# dsakit

A compact library of textbook data structures and algorithms, written as
plain Python that you can read, step through and test. It has no
dependencies outside the standard library.

## Contents

### Linked lists: `dsakit.linked_lists`

`SinglyLinkedList`, `DoublyLinkedList`, `CircularSinglyLinkedList` and
`CircularDoublyLinkedList`. Each one takes an optional iterable of initial
values and supports `push_front`, `push_back`, `remove_all` (this returns how
many values were removed), iteration and `len()`. The doubly linked lists
also support `reversed()`. `SinglyLinkedList.remove` deletes the first
occurrence of a value and raises `ValueError` when the value is absent.

### Stacks and queues: `dsakit.stacks_queues`

- `LinkedStack` has `push`, `pop` and `peek`. It iterates from top to bottom.
- `LinkedQueue` has `enqueue`, `dequeue` and `peek`.
- `CircularQueue(capacity=5)` is a ring buffer that always keeps one slot
  free, so it holds at most `capacity - 1` values. `is_full()` reports when
  that limit is reached, and `enqueue` then raises `OverflowError`.

When the container is empty, `pop`, `dequeue` and `peek` raise `IndexError`.

### Dance partner pairing: `dsakit.dancers`

`pair_dancers(people)` takes `Person(name, sex)` records. It queues men
(`"m"`) and women separately and pairs them in arrival order. It returns a
`Pairing` with the list of `pairs` and the person `waiting` at the head of
the longer queue, or `None`. More than 20 people raise `ValueError`.

### Stack applications: `dsakit.stack_apps`

- `brackets_match(text)` checks that `()` and `[]` balance. Reading stops at
  the first `#`, and any other character makes the text unbalanced.
- `to_octal(n)` returns the octal digits of a non-negative integer.

### String matching: `dsakit.string_match`

- `prefix_table(pattern)` returns the KMP border table.
- `kmp_search(text, pattern)` and `brute_force_search(text, pattern)` return
  the index of the first match, or `-1` when there is none.

### Searching: `dsakit.searching`

- `sequential_search` returns the index of the value, or `-1`.
- `binary_search` and `binary_search_recursive` return the index of the value
  in a sorted sequence, or `-1`.
- `sentinel_search` scans from the end and returns a 1-based position. A
  result of `0` means the value was not found.

### Sorting: `dsakit.sorting`

- `bubble_sort`, `insertion_sort` and `quick_sort` return sorted copies.
- `partition(items, low, high)` partitions a list in place and returns the
  pivot's final index.
- `bubble_sort_passes` and `insertion_sort_passes` yield a snapshot of the
  list after each pass.

### Recursion: `dsakit.recursion`

- `hanoi_moves(n, source="A", target="C", spare="B")` returns the list of
  `(from, to)` moves.
- `factorial(n)` returns `n!`.

### Hashing: `dsakit.hashing`

`LinearProbingTable(size=5)` stores keys at `key % size` and probes forward
when a slot is taken. A one-character string is hashed by its code point.
`put` returns the slot it used and raises `OverflowError` when the table is
full. `table[i]` returns the key in slot `i`, or `None` for an empty slot.

### Binary trees: `dsakit.binary_tree`

`parse_preorder(text)` builds a tree of `TreeNode` objects from a preorder
string in which `#` marks an empty subtree. The module has these traversals:

- recursive: `preorder`, `inorder` and `postorder`
- iterative: `iterative_preorder`, `iterative_inorder` and
  `iterative_postorder`
- by level: `level_order` and `level_order_rows`

### Threaded trees: `dsakit.threaded_tree`

`parse_threaded` builds a tree of `ThreadedNode` objects with parent links.
`thread_inorder`, `thread_preorder` and `thread_postorder` thread the tree in
place. `inorder_threaded`, `preorder_threaded` and `postorder_threaded` then
walk it without a stack.

### Search trees: `dsakit.bst`, `dsakit.avl`

- `BinarySearchTree` has `insert`, `search` (raises `KeyError` when the key
  is absent), `in`, `preorder()`, ascending iteration and `len()`.
- `AVLTree` keeps itself balanced by rotations. It has `insert`, `in`,
  `preorder()`, `height()`, ascending iteration and `len()`.

Both trees ignore duplicate keys: `insert` returns `False` for them.

### Huffman trees: `dsakit.huffman`

`HuffmanTree(weights)` builds the tree in a flat table of `HuffmanEntry`
items. The table has `2n - 1` entries, which you can read as `entries`.
`root()` returns the top entry, and `preorder()` returns the weights in
preorder.

### Graphs: `dsakit.graph`, `dsakit.shortest_paths`, `dsakit.dag`

- `Graph(vertices, matrix, no_edge=None)` is an adjacency-matrix graph. A
  matrix entry of `0`, or one equal to `no_edge`, means there is no edge. It
  has `has_edge`, `neighbours`, `edge_count`, `dfs` and `bfs`.
- `prim(graph, start=0)` and `kruskal(graph)` return lists of `TreeEdge`.
  `prim` raises `ValueError` on a disconnected graph, while `kruskal` returns
  a spanning forest.
- `dijkstra(graph, source=0)` returns a `DijkstraResult` with `distances`,
  `predecessors` and `path(target)`.
- `floyd(graph)` returns the pair `(distances, predecessors)`.
- For directed graphs there are `in_degrees`, `topological_sort` and
  `critical_path`. `critical_path` returns a `CriticalPath` with `order`,
  `early`, `late`, `activities` and `length`. A cycle raises `ValueError`.

## Installation

```
pip install .
```

## Examples

```python
from dsakit.binary_tree import parse_preorder, preorder, inorder, postorder

root = parse_preorder("AB#D##CE###")
print(preorder(root))   # ['A', 'B', 'D', 'C', 'E']
print(inorder(root))    # ['B', 'D', 'A', 'E', 'C']
print(postorder(root))  # ['D', 'B', 'E', 'C', 'A']
```

```python
from dsakit.avl import AVLTree

tree = AVLTree([1, 2, 3, 4, 5])
print(tree.preorder())  # [2, 1, 4, 3, 5]
print(tree.height())    # 3
```

```python
from dsakit.string_match import kmp_search, prefix_table

print(prefix_table("abcac"))                 # [0, 0, 0, 1, 0]
print(kmp_search("ababcabcacbab", "abcac"))  # 5
```

```python
from dsakit.recursion import hanoi_moves

moves = hanoi_moves(3, "A", "C", "B")
print(len(moves))  # 7
print(moves[0])    # ('A', 'C')
```

## What it does not do

dsakit is a library only. It has no command-line program and does not read
input interactively. Every function takes its data as arguments and returns
its result, and nothing is printed.

## Running the tests

```
pip install .[test]
pytest
```
# ftcontainers

Sequence containers that are used through explicit iterator positions.

- `ftcontainers.vector`: `Vector` is a growable array. It keeps track of a capacity the way a contiguous buffer would. The module-level `swap(x, y)` exchanges the contents of two vectors.
- `ftcontainers.storage`: `VectorStorage` holds the element list and the capacity, and applies the growth policy.
- `ftcontainers.iterator`: `NormalIterator` and `ReverseIterator` are random-access positions into a sequence.
- `ftcontainers.utility`: `Pair` and `make_pair`, with the extractors `set_key`, `map_key` and `map_value`.
- `ftcontainers.algorithm`: the range comparisons `equal_to`, `equal` and `lexicographical_compare`.
- `ftcontainers.linked_list`: `Node`, `DoublyLinkedList` and `SinglyLinkedList`.
- `ftcontainers.errors`: `ContainerError`, which subclasses `RuntimeError`, and its subclasses `RangeError`, `ContainerOverflowError` and `ContainerUnderflowError`. The module also provides `throw_range_error(message)`.
- `ftcontainers.demo`: printable walkthroughs and the `ftcontainers-demo` command.

The package has no third-party dependencies.

## Install

```
pip install .
pip install .[test]     # also installs pytest
```

## Vector

```python
from ftcontainers.vector import Vector, swap

v = Vector([1, 2, 3])
v.push_back(4)
v.insert(v.begin(), 0)           # returns the position of the new element
v.erase(v.begin() + 2)           # returns the position after the removed one
print(list(v), v.size(), v.capacity())

filled = Vector.filled(4, 100)   # four copies of 100
print(v < filled, v == Vector(list(v)))

for item in reversed(v):
    print(item)

it = v.rbegin()
print(it.value, (it + 1).value)  # `value` is a read/write property
it.value = 42                    # writes the last element
```

Capacity rules:

- A new vector's capacity equals its initial size.
- Inserting keeps the capacity when the spare room is large enough. Otherwise the capacity becomes `size + max(size, extra)`, which is doubling for a single `push_back`.
- Erasing, `truncate`-style shrinking (`resize` down, `pop_back`, `clear`) and `reserve` with a smaller number never reduce the capacity.
- `assign` and `assign_fill` grow the capacity only when the new contents do not fit.

Other members:

- `begin`, `end`, `rbegin`, `rend`
- `size`, `empty`, `capacity`, `max_size`, `reserve`, `resize(new_size, value=None)`
- `at`, `front`, `back`
- `assign(items)`, `assign_fill(count, value)`
- `push_back`, `pop_back`
- `insert`, `insert_fill`, `insert_range`
- `erase`, `erase_range`
- `swap`, `clear`

Positions may be `NormalIterator`s taken from the same vector, or plain integer indices. Indexing with a slice returns a new `Vector`.

Vectors compare with `==` element by element, and order lexicographically using only `<` on the elements. They are unhashable. `copy.copy` makes an independent copy.

Errors:

- `at` with an out-of-range index raises `IndexError("vector::range_check")`.
- `front`, `back` and `pop_back` raise `IndexError` on an empty vector.
- A negative count or size raises `ValueError`.
- Growing past `max_size()` raises `ContainerOverflowError`.

`swap` exchanges the underlying storage. Iterators taken before the swap therefore keep referring to the same elements, which now belong to the other vector.

## Iterators

`NormalIterator(sequence, index)` supports:

- `+` and `-` with integers
- subtraction of two iterators, which gives the distance
- `+=` and `-=`, which return new iterators
- `it[n]`
- ordering

`base()` returns the index. Comparing iterators over different sequences raises `ValueError`. Reading or writing `value` outside the sequence raises `IndexError`.

`ReverseIterator(base)` refers to the element just before `base`. Its arithmetic and ordering run in the opposite direction.

## Pairs and range comparisons

```python
from ftcontainers.utility import make_pair, map_key, map_value
from ftcontainers.algorithm import equal, lexicographical_compare

p = make_pair("a", 1)
print(p < make_pair("a", 2), map_key(p), map_value(p))
print(equal([1, 2], [1, 2, 3]))                  # True: extra items in the second range are ignored
print(lexicographical_compare([1, 2], [1, 2, 0]))  # True
```

`set_key(value)` returns the value itself. It raises `TypeError` if the value is unhashable.

## Linked lists

```python
from ftcontainers.linked_list import DoublyLinkedList, SinglyLinkedList

dll = DoublyLinkedList([4, 5, 6, 7])
dll.remove(dll.node_at(1))
node = dll.insert_after(dll.node_at(0), 9)
print(list(dll), len(dll))
print(dll.render())

sll = SinglyLinkedList()
for word in ["red", "orange", "yellow"]:
    sll.push_front(word)
print(sll.render())             # yellow->orange->red
```

Errors:

- `node_at` raises `IndexError` for a missing position.
- `remove` raises `ValueError` for a node that is not in the list.
- `SinglyLinkedList.render` raises `ValueError` when the list is empty.

## Demo

```
ftcontainers-demo                # both walkthroughs
ftcontainers-demo relational     # vector comparison report
ftcontainers-demo reverse        # reverse-iterator report
```

The same reports are available as strings from these functions in `ftcontainers.demo`:

- `relational_demo()`
- `reverse_iterator_demo()`
- `compare_report(lhs, rhs)`
- `size_report(vector, print_content=True)`

## What is not included

The package offers only sequence containers. There is no associative map or set built on a tree, and no stack adapter. `Pair` and the key/value extractors are provided on their own, without a container that uses them.

## Tests

```
pytest
```
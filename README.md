# dslab

A collection of classic data structures and algorithms. Each one can be used
as a library, and each comes with its own console program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line programs

| Command           | What it does                                                        |
|-------------------|---------------------------------------------------------------------|
| `dslab-hanoi`     | Prints the Tower of Hanoi moves, recursively and iteratively        |
| `dslab-stack`     | Menu to push, pop and display on a stack of at most 10 integers     |
| `dslab-infix`     | Converts one infix expression to postfix                            |
| `dslab-queue`     | Menu to insert, delete and display on a circular queue of 5 slots   |
| `dslab-list`      | Menu to insert and delete at either end or at a position in a singly linked list |
| `dslab-bst`       | Menu to build a binary search tree, delete from it and show its traversals |
| `dslab-graph`     | Menu to build an undirected graph, show its adjacency matrix, and run BFS and DFS |
| `dslab-search`    | Reads a sorted array, then answers iterative or recursive binary searches |
| `dslab-hash`      | Menu to insert, search, delete and display on a 10-slot linear-probing hash table |
| `dslab-students`  | Menu to add, delete, search, update, sort and list student records  |

The programs read from standard input, so you can type at them or pipe input
in. `dslab-hanoi` and `dslab-infix` also take their input as the first
command-line argument:

```
dslab-hanoi 3
dslab-infix "a+b*(c^d-e)"
echo "a+b*(c^d-e)" | dslab-infix
```

The menu programs exit when the Exit entry is chosen or when input ends.

## Library use

```python
from dslab.hanoi import hanoi_recursive, hanoi_iterative
from dslab.infix import infix_to_postfix
from dslab.binary_search import binary_search, recursive_binary_search
from dslab.stack import BoundedStack
from dslab.circular_queue import CircularQueue
from dslab.linked_list import SinglyLinkedList
from dslab.bst import BinarySearchTree
from dslab.graph import Graph
from dslab.hashing import LinearProbingTable
from dslab.student_db import Student, StudentDatabase

hanoi_recursive(2)                         # [Move(1, 'A', 'B'), Move(2, 'A', 'C'), Move(1, 'B', 'C')]

infix_to_postfix("a+b*c")                  # "abc*+"
binary_search([1, 3, 5, 7], 5)             # 2; None if the key is missing

stack = BoundedStack(capacity=3)
stack.push(1)
stack.push(2)
stack.pop()                                # 2

queue = CircularQueue(capacity=2)
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()                            # 1

items = SinglyLinkedList([1, 2, 4])
items.insert_at_position(3, 3)             # positions are 1-based
list(items)                                # [1, 2, 3, 4]

tree = BinarySearchTree.from_values([50, 30, 70, 20, 40])
tree.delete(30)
tree.inorder()                             # [20, 40, 50, 70]

graph = Graph(4)
graph.add_edge(0, 1)
graph.add_edge(0, 2)
graph.add_edge(2, 3)
graph.bfs(0)                               # [0, 1, 2, 3]
graph.dfs(0)                               # [0, 1, 2, 3]

table = LinearProbingTable()
table.insert(15)                           # returns the slot index, 5
table.search(15)                           # 5; None if absent

db = StudentDatabase()
db.add(Student(1, "Ada", 3.9))
db.add(Student(2, "Alan", 3.7))
db.sort_by_gpa()                           # highest GPA first
db.find(2)                                 # the Student, or None
```

`hanoi_iterative(n)` labels its poles S, A and D and moves the disks from S
to D.

## Errors

Errors are raised as exceptions:

- `BoundedStack.push` on a full stack raises `StackOverflow`; `pop` and `peek`
  on an empty one raise `StackUnderflow`.
- `CircularQueue.enqueue` on a full queue raises `QueueOverflow`; `dequeue` on
  an empty one raises `QueueUnderflow`.
- `infix_to_postfix` raises `InvalidExpression` for unmatched parentheses.
- `LinearProbingTable.insert` raises `TableFull` when no slot is free, and
  `delete` raises `KeyError` for a missing key.
- `SinglyLinkedList` raises `ValueError` for a position below 1 and
  `IndexError` for a position past the end or a deletion from an empty list.
- `Graph` raises `ValueError` for a vertex outside its range.
- `StudentDatabase.add` raises `DatabaseFull` at 100 students and
  `DuplicateStudent` for a repeated ID; `delete` and `update` raise `KeyError`
  for an unknown ID.

## Limitations

The student database lives in memory only: nothing is saved to disk, and the
records are gone when `dslab-students` exits. Student names are cut to 49
characters.
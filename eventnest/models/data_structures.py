"""
Custom Data Structures for EventNest
Built ENTIRELY from scratch — the application state lives in these containers.

This module contains hand-built implementations of:
1. SetView       — Duplicate-free view over an ordered sequence
2. ArrayStack    — Dynamic-array LIFO stack for view navigation history
3. HashMap       — Hash table with separate chaining and power-of-two resizing
4. PriorityQueue — Binary heap ordered by natural order or a comparator
5. AdjacencyList — Directed graph stored as parallel vertex/neighbor lists

Author: EventNest Team
Purpose: Back the scheduling and friendship state with fundamental data structures
"""

from collections.abc import MutableSet


class EmptyStackError(IndexError):
    """Raised by pop/peek on an empty ArrayStack."""


class EmptyPriorityQueueError(IndexError):
    """Raised by remove/peek on an empty PriorityQueue."""


class VertexNotFoundError(KeyError):
    """Raised when a neighbor lookup names a vertex the graph does not hold."""


# ============================================================================
# 1. SET VIEW — Unique-element wrapper over a sequence
# ============================================================================

class SetView(MutableSet):
    """
    Minimal set built on top of an ordered list.

    How it works:
    - The source sequence is scanned once, keeping only first occurrences
    - Elements are the same objects held by the source container
    - Iteration follows the order of the source sequence
    - Membership is a linear scan, which is fine for the small vertex and
      neighbor lists this is built from

    Time Complexity:
    - contains, add, discard: O(n)
    - construction:           O(n^2) in the worst case
    """

    def __init__(self, source=()):
        self._elements = []
        for element in source:
            if element not in self._elements:
                self._elements.append(element)

    def __contains__(self, element):
        return element in self._elements

    def __iter__(self):
        return iter(self._elements)

    def __len__(self):
        return len(self._elements)

    def add(self, element):
        """Append element unless an equal one is already present."""
        if element not in self._elements:
            self._elements.append(element)

    def discard(self, element):
        if element in self._elements:
            self._elements.remove(element)

    def is_empty(self):
        return not self._elements

    def clear(self):
        self._elements = []

    def to_list(self):
        """Return the elements as a plain list, in view order."""
        return list(self._elements)

    def __repr__(self):
        return f'SetView({self._elements!r})'


# ============================================================================
# 2. ARRAY STACK — Dynamic-array LIFO stack
# ============================================================================

class ArrayStack:
    """
    LIFO stack backed by a fixed-size array that doubles when full.

    How it works:
    - Live elements occupy slots 0..top of the backing array
    - 'top' is -1 for an empty stack
    - push on a full array copies everything into one twice as large
    - pop and clear overwrite vacated slots with None so evicted
      objects are not kept alive by the stack

    Time Complexity: O(1) amortized push, O(1) pop/peek
    Space Complexity: O(capacity)
    """

    DEFAULT_CAPACITY = 10

    def __init__(self, initial_capacity=DEFAULT_CAPACITY):
        if initial_capacity <= 0:
            raise ValueError("Capacity must be positive")
        self._elements = [None] * initial_capacity
        self._top = -1

    def _ensure_capacity(self):
        """Double the backing array when the top slot is the last slot."""
        if self._top == len(self._elements) - 1:
            self._elements = self._elements + [None] * len(self._elements)

    def push(self, item):
        """Place item on top of the stack."""
        self._ensure_capacity()
        self._top += 1
        self._elements[self._top] = item

    def pop(self):
        """Remove and return the top element."""
        if self.is_empty():
            raise EmptyStackError("pop from an empty stack")
        item = self._elements[self._top]
        self._elements[self._top] = None
        self._top -= 1
        return item

    def peek(self):
        """Return the top element without removing it."""
        if self.is_empty():
            raise EmptyStackError("peek from an empty stack")
        return self._elements[self._top]

    def is_empty(self):
        return self._top == -1

    def size(self):
        return self._top + 1

    def clear(self):
        """Release every live slot and reset the stack to empty."""
        for i in range(self._top + 1):
            self._elements[i] = None
        self._top = -1

    @property
    def capacity(self):
        return len(self._elements)

    def __len__(self):
        return self._top + 1

    def __repr__(self):
        return f'ArrayStack({self._elements[:self._top + 1]!r})'


# ============================================================================
# 3. HASHMAP — Hash Table with Separate Chaining
# ============================================================================

class _HashEntry:
    """
    Key/value pair stored in one of the HashMap's bucket chains.
    The key is fixed; the value is overwritten in place on a repeated put.
    """
    def __init__(self, key, value):
        self.key = key
        self.value = value

    def __repr__(self):
        return f'{self.key!r}={self.value!r}'


class HashMap:
    """
    Hash Table implementation using separate chaining for collision resolution.

    How it works:
    - An internal array of 'buckets' holds chains of key-value entries
    - Bucket index = (hash(key) & 0x7FFFFFFF) % capacity
    - Capacity is always a power of two
    - Before an insertion, if size >= threshold the table doubles and every
      entry is re-indexed against the new capacity
    - The table never shrinks

    Lookups that miss return None (or False); only a None key is an error.

    Time Complexity:
    - Average case: O(1) for get, put, remove, contains_key
    - Worst case:   O(n) when all keys hash to the same bucket

    Space Complexity: O(n + capacity)
    """

    DEFAULT_INITIAL_CAPACITY = 16
    DEFAULT_LOAD_FACTOR = 0.75

    def __init__(self, initial_capacity=DEFAULT_INITIAL_CAPACITY, load_factor=DEFAULT_LOAD_FACTOR):
        if initial_capacity < 0:
            raise ValueError(f"Illegal initial capacity: {initial_capacity}")
        if load_factor <= 0 or load_factor != load_factor:
            raise ValueError(f"Illegal load factor: {load_factor}")
        capacity = 1
        while capacity < initial_capacity:
            capacity <<= 1
        self._load_factor = load_factor
        self._buckets = [None] * capacity
        self._size = 0
        self._threshold = int(capacity * load_factor)

    @staticmethod
    def _check_key(key):
        if key is None:
            raise ValueError("Key cannot be None")

    @staticmethod
    def _index_for(key, capacity):
        return (hash(key) & 0x7FFFFFFF) % capacity

    def _find_entry(self, key):
        """Return the entry holding key, or None when the key is absent."""
        bucket = self._buckets[self._index_for(key, len(self._buckets))]
        if bucket is None:
            return None
        for entry in bucket:
            if entry.key == key:
                return entry
        return None

    def _resize(self):
        """Double capacity and rehash all existing entries."""
        new_capacity = len(self._buckets) * 2
        new_buckets = [None] * new_capacity
        for bucket in self._buckets:
            if bucket is None:
                continue
            for entry in bucket:
                index = self._index_for(entry.key, new_capacity)
                if new_buckets[index] is None:
                    new_buckets[index] = []
                new_buckets[index].append(entry)
        self._buckets = new_buckets
        self._threshold = int(new_capacity * self._load_factor)

    def put(self, key, value):
        """
        Insert or overwrite a key-value pair.

        Returns:
            The value previously stored under key, or None if it was new.
        """
        self._check_key(key)
        if self._size >= self._threshold:
            self._resize()
        index = self._index_for(key, len(self._buckets))
        if self._buckets[index] is None:
            self._buckets[index] = []
        bucket = self._buckets[index]
        for entry in bucket:
            if entry.key == key:
                old_value = entry.value
                entry.value = value
                return old_value
        bucket.append(_HashEntry(key, value))
        self._size += 1
        return None

    def get(self, key):
        """Return the value stored under key, or None if not found."""
        self._check_key(key)
        entry = self._find_entry(key)
        return entry.value if entry is not None else None

    def remove(self, key):
        """Delete key and return its value, or None if it was absent."""
        self._check_key(key)
        bucket = self._buckets[self._index_for(key, len(self._buckets))]
        if bucket is None:
            return None
        for i, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[i]
                self._size -= 1
                return entry.value
        return None

    def contains_key(self, key):
        self._check_key(key)
        return self._find_entry(key) is not None

    def put_if_absent(self, key, value):
        """
        Store value only when key is not already mapped.

        Returns:
            The existing value if key was present, otherwise None.
        """
        self._check_key(key)
        entry = self._find_entry(key)
        if entry is not None:
            return entry.value
        self.put(key, value)
        return None

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def clear(self):
        """Remove all entries. Capacity is kept."""
        self._buckets = [None] * len(self._buckets)
        self._size = 0

    def keys(self):
        """Return a list of all keys in bucket order, then chain order."""
        return [entry.key for entry in self._entries()]

    def values(self):
        """Return a list of all values in bucket order, then chain order."""
        return [entry.value for entry in self._entries()]

    def items(self):
        """Return a list of (key, value) tuples."""
        return [(entry.key, entry.value) for entry in self._entries()]

    def _entries(self):
        for bucket in self._buckets:
            if bucket is None:
                continue
            for entry in bucket:
                yield entry

    @property
    def capacity(self):
        return len(self._buckets)

    @property
    def threshold(self):
        return self._threshold

    @property
    def load_factor(self):
        return self._load_factor

    def __setitem__(self, key, value):
        """Same as put(), without the old value. A None key raises ValueError."""
        self.put(key, value)

    def __getitem__(self, key):
        """Strict lookup: a missing key raises KeyError instead of returning None."""
        self._check_key(key)
        entry = self._find_entry(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __delitem__(self, key):
        """Strict removal: a missing key raises KeyError instead of returning None."""
        if not self.contains_key(key):
            raise KeyError(key)
        self.remove(key)

    def __contains__(self, key):
        return key is not None and self._find_entry(key) is not None

    def __iter__(self):
        return iter(self.keys())

    def __len__(self):
        return self._size

    def __repr__(self):
        body = ', '.join(repr(entry) for entry in self._entries())
        return f'HashMap(size={self._size}, capacity={len(self._buckets)}, [{body}])'


# ============================================================================
# 4. PRIORITY QUEUE — Array-backed Binary Heap
# ============================================================================

def _natural_order(a, b):
    return (a > b) - (a < b)


def _comparator_from_key(key):
    def compare(a, b):
        return _natural_order(key(a), key(b))
    return compare


class PriorityQueue:
    """
    Priority queue built from scratch on a flat binary heap.

    How it works:
    - Stored as a flat array where for element at index i:
      - Parent is at (i-1) // 2
      - Left child is at 2i + 1
      - Right child is at 2i + 2
    - The element that compares lowest has the highest priority and sits
      at the root. Ordering is natural (< and >) unless a comparator
      cmp(a, b) -> int is given; the choice is fixed at construction.
    - The array grows by ~2x below 64 slots and by 1.5x above; never shrinks

    Time Complexity:
    - add, remove: O(log n)
    - peek:        O(1)
    - to_list:     O(n log n), works on a copy
    - remove_if:   O(n)
    """

    DEFAULT_INITIAL_CAPACITY = 11

    def __init__(self, comparator=None, initial_capacity=DEFAULT_INITIAL_CAPACITY, key=None):
        if initial_capacity < 1:
            raise ValueError("Initial capacity must be positive")
        if comparator is not None and key is not None:
            raise ValueError("Pass either a comparator or a key, not both")
        if key is not None:
            comparator = _comparator_from_key(key)
        self._heap = [None] * initial_capacity
        self._size = 0
        self._comparator = comparator
        self._compare = comparator if comparator is not None else _natural_order

    @property
    def comparator(self):
        return self._comparator

    @property
    def capacity(self):
        return len(self._heap)

    def _grow(self):
        old_capacity = len(self._heap)
        if old_capacity < 64:
            new_capacity = old_capacity + old_capacity + 2
        else:
            new_capacity = old_capacity + (old_capacity >> 1)
        self._heap.extend([None] * (new_capacity - old_capacity))

    def _sift_up(self, k, item):
        """Walk item from slot k toward the root, sliding parents down."""
        heap = self._heap
        compare = self._compare
        while k > 0:
            parent = (k - 1) >> 1
            above = heap[parent]
            if compare(item, above) >= 0:
                break
            heap[k] = above
            k = parent
        heap[k] = item

    def _sift_down(self, heap, size, k, item):
        """
        Walk item from slot k toward the leaves of heap[0..size).
        Works on the live heap or on a snapshot copy.
        """
        compare = self._compare
        half = size >> 1
        while k < half:
            child = (k << 1) + 1
            below = heap[child]
            right = child + 1
            if right < size and compare(below, heap[right]) > 0:
                child = right
                below = heap[child]
            if compare(item, below) <= 0:
                break
            heap[k] = below
            k = child
        heap[k] = item

    def add(self, item):
        """Insert an item, keeping the heap property."""
        if item is None:
            raise ValueError("Cannot add None to a priority queue")
        if self._size >= len(self._heap):
            self._grow()
        self._sift_up(self._size, item)
        self._size += 1

    def remove(self):
        """Remove and return the item with the highest priority."""
        if self._size == 0:
            raise EmptyPriorityQueueError("remove from an empty priority queue")
        heap = self._heap
        last_index = self._size - 1
        result = heap[0]
        last_item = heap[last_index]
        heap[last_index] = None
        self._size = last_index
        if self._size > 0:
            self._sift_down(heap, self._size, 0, last_item)
        return result

    def peek(self):
        """Return the highest-priority item without removing it."""
        if self._size == 0:
            raise EmptyPriorityQueueError("peek from an empty priority queue")
        return self._heap[0]

    def is_empty(self):
        return self._size == 0

    def size(self):
        return self._size

    def clear(self):
        for i in range(self._size):
            self._heap[i] = None
        self._size = 0

    def to_list(self):
        """
        Return every item, highest priority first, without touching the queue.

        Algorithm:
        1. Copy heap[0..size) into a scratch array
        2. Repeatedly take the scratch root, move the last scratch slot
           to the root and sift it down
        """
        copy = self._heap[:self._size]
        remaining = self._size
        result = []
        while remaining > 0:
            result.append(copy[0])
            remaining -= 1
            last_item = copy[remaining]
            copy[remaining] = None
            if remaining > 0:
                self._sift_down(copy, remaining, 0, last_item)
        return result

    def remove_if(self, predicate):
        """
        Remove every item for which predicate(item) is true.

        Survivors are packed into a fresh array and heap order is rebuilt
        bottom-up from the last internal node.

        Returns:
            bool: True if at least one item was removed
        """
        if predicate is None:
            raise ValueError("Predicate cannot be None")
        survivors = [item for item in self._heap[:self._size] if not predicate(item)]
        if len(survivors) == self._size:
            return False
        capacity = len(self._heap)
        self._heap = survivors + [None] * (capacity - len(survivors))
        self._size = len(survivors)
        for i in range((self._size >> 1) - 1, -1, -1):
            self._sift_down(self._heap, self._size, i, self._heap[i])
        return True

    def __iter__(self):
        return iter(self.to_list())

    def __len__(self):
        return self._size

    def __repr__(self):
        return f'PriorityQueue(size={self._size})'


# ============================================================================
# 5. ADJACENCY LIST — Directed Graph
# ============================================================================

class AdjacencyList:
    """
    Directed graph keyed by vertex equality.

    How it works:
    - 'vertices' is an ordered list; 'adjacency' is a parallel list whose
      i-th entry holds the destinations reachable from vertices[i]
    - An edge source -> destination exists iff destination is in the
      source's neighbor list
    - Self-loops and repeated identical edges are refused (add returns False)
    - Removing a vertex strips it from every neighbor list as well

    Vertex lookup is a linear scan; the graph is meant for small friend
    networks. Swap in a hashed vertex index for large graphs.

    Time Complexity:
    - add_vertex, contains_vertex: O(V)
    - add_edge, contains_edge:     O(V + deg)
    - remove_vertex:               O(V + E)
    """

    def __init__(self):
        self._vertices = []
        self._adjacency = []
        self._edge_count = 0

    @staticmethod
    def _check_vertex(*vertices):
        for vertex in vertices:
            if vertex is None:
                raise ValueError("Vertex cannot be None")

    def _index_of(self, vertex):
        for i, existing in enumerate(self._vertices):
            if existing == vertex:
                return i
        return -1

    def add_vertex(self, vertex):
        """Add vertex. Returns False if it already exists."""
        self._check_vertex(vertex)
        if self._index_of(vertex) >= 0:
            return False
        self._vertices.append(vertex)
        self._adjacency.append([])
        return True

    def add_edge(self, source, destination):
        """
        Add the directed edge source -> destination, creating either
        endpoint if missing.

        Returns:
            bool: False for a self-loop or an edge that already exists
        """
        self._check_vertex(source, destination)
        if source == destination:
            return False
        self.add_vertex(source)
        self.add_vertex(destination)
        neighbors = self._adjacency[self._index_of(source)]
        if destination in neighbors:
            return False
        neighbors.append(destination)
        self._edge_count += 1
        return True

    def contains_vertex(self, vertex):
        self._check_vertex(vertex)
        return self._index_of(vertex) >= 0

    def contains_edge(self, source, destination):
        self._check_vertex(source, destination)
        index = self._index_of(source)
        if index < 0:
            return False
        return destination in self._adjacency[index]

    def remove_vertex(self, vertex):
        """Delete vertex with all incoming and outgoing edges."""
        self._check_vertex(vertex)
        index = self._index_of(vertex)
        if index < 0:
            return False
        for neighbors in self._adjacency:
            j = 0
            while j < len(neighbors):
                if neighbors[j] == vertex:
                    del neighbors[j]
                    self._edge_count -= 1
                else:
                    j += 1
        self._edge_count -= len(self._adjacency[index])
        del self._vertices[index]
        del self._adjacency[index]
        return True

    def remove_edge(self, source, destination):
        self._check_vertex(source, destination)
        index = self._index_of(source)
        if index < 0:
            return False
        neighbors = self._adjacency[index]
        for j, neighbor in enumerate(neighbors):
            if neighbor == destination:
                del neighbors[j]
                self._edge_count -= 1
                return True
        return False

    def get_vertices(self):
        return SetView(self._vertices)

    def get_neighbors(self, vertex):
        """Return the destinations of vertex's outgoing edges."""
        self._check_vertex(vertex)
        index = self._index_of(vertex)
        if index < 0:
            raise VertexNotFoundError(vertex)
        return SetView(self._adjacency[index])

    def get_vertex_count(self):
        return len(self._vertices)

    def get_edge_count(self):
        return self._edge_count

    def is_empty(self):
        return not self._vertices

    def clear(self):
        self._vertices = []
        self._adjacency = []
        self._edge_count = 0

    def put_if_absent(self, vertex):
        """
        Add vertex when missing.

        Returns:
            bool: True if the vertex was already present
        """
        self._check_vertex(vertex)
        existed = self._index_of(vertex) >= 0
        if not existed:
            self.add_vertex(vertex)
        return existed

    def __contains__(self, vertex):
        return vertex is not None and self._index_of(vertex) >= 0

    def __len__(self):
        return len(self._vertices)

    def __repr__(self):
        return f'AdjacencyList(vertices={len(self._vertices)}, edges={self._edge_count})'

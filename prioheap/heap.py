"""
Binary heap of (weight, payload) pairs.

The heap keeps either the smallest (MIN) or the largest (MAX) weight
at the top. Payloads are carried along and never compared.

>>> heap = Heap()
>>> heap.insert(3, "first")
>>> heap.insert(1, "second")
>>> heap.extract_top()
(1, 'second')
>>> heap.extract_top()
(3, 'first')
>>> heap.extract_top() is None
True

>>> big = Heap(MAX, [(2, "b"), (5, "e"), (4, "d")])
>>> big.peek_top()
(5, 'e')
>>> len(big)
3
"""

import operator


MIN = "min"
MAX = "max"

_BETTER = {
    MIN: operator.lt,
    MAX: operator.gt
}


class HeapError(Exception):
    pass


class InvalidMode(HeapError):
    pass


def _better_for(mode):
    try:
        return _BETTER[mode]
    except (KeyError, TypeError):
        raise InvalidMode("mode must be one of {0!r} or {1!r}, got {2!r}".format(MIN, MAX, mode))


class Heap(object):
    def __init__(self, mode=MIN, iterable=()):
        self._better = _better_for(mode)
        self._mode = mode
        self._heap = []

        for weight, payload in iterable:
            self.insert(weight, payload)

    @property
    def mode(self):
        return self._mode

    def insert(self, weight, payload=None):
        self._heap.append(_Node(weight, payload))
        _up(self._heap, len(self._heap) - 1, self._better)

    def extract_top(self):
        """
        Remove and return the top (weight, payload) pair, or None when
        the heap is empty.
        """

        if not self._heap:
            return None

        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            _down(self._heap, 0, self._better)
        return top.pair()

    def peek(self, index):
        """
        Return the (weight, payload) pair at the 1-based position `index`
        without removing it, or None when there is no such position.
        """

        if not 1 <= index <= len(self._heap):
            return None
        return self._heap[index - 1].pair()

    def peek_top(self):
        return self.peek(1)

    def size(self):
        return len(self._heap)

    def is_empty(self):
        return not self._heap

    def is_valid(self):
        heap = self._heap
        better = self._better
        length = len(heap)

        for index, node in enumerate(heap):
            left_index = 2 * index + 1
            for child_index in (left_index, left_index + 1):
                if child_index >= length:
                    break
                if better(heap[child_index].weight, node.weight):
                    return False
        return True

    def clear(self):
        self._heap = []

    def remove(self, payload):
        """
        Remove the first node (in storage order) carrying `payload` and
        return its (weight, payload) pair, or None if no node matches.
        """

        index = _index_of(self._heap, payload)
        if index is None:
            return None

        node = self._heap[index]
        last = self._heap.pop()
        if index < len(self._heap):
            self._heap[index] = last
            index = _down(self._heap, index, self._better)
            _up(self._heap, index, self._better)
        return node.pair()

    def merge(self, other):
        """
        Return a new heap with the mode of this heap that holds the
        nodes of both `self` and `other`. Neither operand is modified.
        """

        if not isinstance(other, Heap):
            raise TypeError("can only merge with another Heap, got {0!r}".format(type(other).__name__))

        merged = Heap(self._mode)
        for source in (self, other):
            merged._fill_from(source)
        return merged

    def rebuilt(self, mode):
        """
        Return a new heap of the given mode holding every node of this
        heap. The mode of an existing heap never changes in place.
        """

        heap = Heap(mode)
        heap._fill_from(self)
        return heap

    def _fill_from(self, source):
        drained = source._copy()
        while drained:
            weight, payload = drained.extract_top()
            self.insert(weight, payload)

    def _copy(self):
        heap = Heap(self._mode)
        heap._heap = list(self._heap)
        return heap

    def __contains__(self, payload):
        return _index_of(self._heap, payload) is not None

    def __len__(self):
        return len(self._heap)

    def __repr__(self):
        return "<{0} mode={1!r} size={2}>".format(type(self).__name__, self._mode, len(self._heap))


def merge(left, right):
    return left.merge(right)


class _Node(object):
    __slots__ = "weight", "payload"

    def __init__(self, weight, payload):
        self.weight = weight
        self.payload = payload

    def pair(self):
        return self.weight, self.payload


def _index_of(array, payload):
    for index, node in enumerate(array):
        if node.payload == payload:
            return index
    return None


def _up(array, index, better):
    node = array[index]

    while index > 0:
        parent_index = (index - 1) // 2
        parent = array[parent_index]
        if better(parent.weight, node.weight):
            break
        array[index] = parent
        index = parent_index

    array[index] = node
    return index


def _down(array, index, better):
    length = len(array)

    while True:
        best = index

        # The right child wins only when strictly better than the left,
        # so equal children resolve to the left one.
        left_index = 2 * index + 1
        if left_index < length:
            if better(array[left_index].weight, array[best].weight):
                best = left_index

        right_index = left_index + 1
        if right_index < length:
            if better(array[right_index].weight, array[best].weight):
                best = right_index

        if best == index:
            return index

        array[index], array[best] = array[best], array[index]
        index = best

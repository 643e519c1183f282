#########################################
# Bounded, linear undo/redo history of  #
# coloring snapshots                    #
#########################################

from collections import deque
import copy
import datetime
import logging

LOG = logging.getLogger(__name__)


class HistorySnapshot(object):
    'An immutable copy of engine-visible state.'

    def __init__(self, coloring, action='', timestamp=None):
        self.coloring = copy.deepcopy(coloring)
        self.action = action
        if timestamp is None:
            timestamp = datetime.datetime.now()
        self.timestamp = timestamp

    def __eq__(self, other):
        if not isinstance(other, HistorySnapshot):
            return NotImplemented
        return (self.coloring == other.coloring and
                self.action == other.action and
                self.timestamp == other.timestamp)

    def __repr__(self):
        return 'fourcolor.HistorySnapshot(%r, %r, %s)' % \
            (self.coloring, self.action,
             self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f'))


class HistoryManager(object):
    '''Fixed-capacity stack of snapshots with a cursor.  Pushing while the
    cursor is not at the tail discards the redo branch; pushing beyond
    capacity discards the oldest snapshot.'''

    def __init__(self, capacity=20):
        if capacity < 1:
            raise ValueError('history capacity must be at least 1, not %d' %
                             capacity)
        self._stack = deque(maxlen=capacity)
        self._cursor = -1   # Index of the current snapshot; -1 when empty

    @property
    def capacity(self):
        return self._stack.maxlen

    @property
    def cursor(self):
        return self._cursor

    def __len__(self):
        return len(self._stack)

    def __iter__(self):
        'Iterate over copies of the retained snapshots, oldest first.'
        return iter([copy.deepcopy(s) for s in self._stack])

    def push(self, snapshot):
        'Append a copy of a snapshot after the cursor and move to it.'
        # Discard the redo branch.
        while len(self._stack) > self._cursor + 1:
            self._stack.pop()

        # The deque drops the oldest entry itself once full.
        self._stack.append(copy.deepcopy(snapshot))
        self._cursor = len(self._stack) - 1

    def undo(self):
        '''Step back one snapshot and return a copy of it, or None if there is
        nothing to step back to.'''
        if self._cursor <= 0:
            return None
        self._cursor -= 1
        LOG.debug('Undo to position %d of %d', self._cursor, len(self))
        return copy.deepcopy(self._stack[self._cursor])

    def redo(self):
        '''Step forward one snapshot and return a copy of it, or None if the
        cursor is already at the tail.'''
        if self._cursor >= len(self._stack) - 1:
            return None
        self._cursor += 1
        LOG.debug('Redo to position %d of %d', self._cursor, len(self))
        return copy.deepcopy(self._stack[self._cursor])

    def current(self):
        'Return a copy of the snapshot at the cursor, or None if empty.'
        if self._cursor < 0:
            return None
        return copy.deepcopy(self._stack[self._cursor])

    def can_undo(self):
        return self._cursor > 0

    def can_redo(self):
        return self._cursor < len(self._stack) - 1

    def clear(self):
        'Discard every snapshot.'
        self._stack.clear()
        self._cursor = -1

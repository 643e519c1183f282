#########################################
# Exact coloring by depth-first search  #
# with forward checking, seeded by a    #
# greedy pass                           #
#########################################

import logging
import time
from fourcolor.algorithm import common

LOG = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 100000


class SearchLimitReached(Exception):
    'The search used up its step or time budget.'

    def __init__(self, steps):
        self.steps = steps
        super().__init__('search stopped after %d step(s)' % steps)


class _Search(object):
    'State of one depth-first search over a set of free positions.'

    def __init__(self, colors, adj, max_colors, forbidden, max_steps=None,
                 deadline=None):
        self.colors = colors
        self.adj = adj
        self.max_colors = max_colors
        self.forbidden = forbidden
        self.max_steps = max_steps
        self.deadline = deadline
        self.steps = 0
        self.domains = {}

    def _tick(self):
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise SearchLimitReached(self.steps - 1)
        if self.deadline is not None and time.monotonic() >= self.deadline:
            raise SearchLimitReached(self.steps)

    def run(self, free):
        '''Try to color every position in free, in order, without disturbing
        any other position.  Return True on success.  On failure every free
        position is left uncolored.'''
        colors = self.colors
        self.domains = {}
        for v in free:
            used = common.used_colors(v, colors, self.adj)
            self.domains[v] = {c for c in range(self.max_colors)
                               if c not in used and c not in self.forbidden[v]}
            if not self.domains[v]:
                return False
        return self._extend(free)

    def _choose(self, frame):
        '''Undo the frame's current color, if any, and give its position the
        next remaining color that leaves every uncolored neighbor a choice.
        Return False when the frame has no colors left.'''
        v, remaining, pruned = frame
        colors = self.colors
        domains = self.domains
        if colors[v] != common.UNCOLORED:
            for u in pruned:
                domains[u].add(colors[v])
            del pruned[:]
            colors[v] = common.UNCOLORED
        while remaining:
            c = remaining.pop()
            colors[v] = c

            # Forward checking: remove c from every uncolored neighbor and
            # stop early if a neighbor has nothing left.
            wiped_out = False
            for u in self.adj[v]:
                if colors[u] == common.UNCOLORED and c in domains.get(u, ()):
                    domains[u].discard(c)
                    pruned.append(u)
                    if not domains[u]:
                        wiped_out = True
            if not wiped_out:
                return True
            for u in pruned:
                domains[u].add(c)
            del pruned[:]
            colors[v] = common.UNCOLORED
        return False

    def _extend(self, free):
        # One frame per colored position: (position, colors still to try,
        # neighbors pruned by the current color).
        stack = []
        while len(stack) < len(free):
            self._tick()
            v = free[len(stack)]
            stack.append((v, sorted(self.domains[v], reverse=True), []))
            while not self._choose(stack[-1]):
                stack.pop()
                if not stack:
                    return False
        return True


def greedy_prefill(order, colors, adj, max_colors, forbidden):
    '''Give each uncolored position, in order, its smallest available color.
    Positions with no available color stay uncolored.'''
    for v in order:
        if colors[v] != common.UNCOLORED:
            continue
        c = common.smallest_available(v, colors, adj, max_colors, forbidden)
        if c is not None:
            colors[v] = c


def compute(model, max_colors=4, constraints=None, randomize=False,
            seed=None, palette=None, max_steps=DEFAULT_MAX_STEPS,
            timeout=None, **kwargs):
    '''Color the graph with at most max_colors colors if that is possible
    within the search budget.  Nodes left unresolved fall back to color 0,
    in which case the result is flagged invalid by validation.'''
    common.check_max_colors(max_colors)
    n = len(model)
    adj = common.neighbor_lists(model)
    degrees = model.degrees()
    ranks = common.tie_ranks(n, randomize, seed)
    order = sorted(range(n), key=lambda v: (-degrees[v], ranks[v]))
    colors, forbidden = common.apply_constraints(model, constraints)
    pinned = [c != common.UNCOLORED for c in colors]

    greedy_prefill(order, colors, adj, max_colors, forbidden)
    prefill = list(colors)
    metadata = {'algorithm': 'backtracking', 'steps': 0,
                'exhausted': False, 'aborted': False}

    # Search from the first position the greedy pass could not color.  If
    # that fails, release the greedy colors ahead of it as well.
    first = next((k for k, v in enumerate(order)
                  if colors[v] == common.UNCOLORED), None)
    if first is not None:
        deadline = None
        if timeout is not None:
            deadline = time.monotonic() + timeout/1000.0
        search = _Search(colors, adj, max_colors, forbidden, max_steps,
                         deadline)
        attempts = [[v for v in order[first:] if not pinned[v]]]
        everything = [v for v in order if not pinned[v]]
        if everything != attempts[0]:
            attempts.append(everything)
        found = False
        try:
            for free in attempts:
                for v in free:
                    colors[v] = common.UNCOLORED
                if search.run(free):
                    found = True
                    break
                for v in free:
                    colors[v] = prefill[v]
            if not found:
                metadata['exhausted'] = True
                LOG.debug('Backtracking exhausted the search space for '
                          '%d color(s)', max_colors)
        except SearchLimitReached as ex:
            metadata['aborted'] = True
            LOG.debug('Backtracking gave up with %d color(s): %s',
                      max_colors, ex)
            colors[:] = prefill
        metadata['steps'] = search.steps

        # Anything still unresolved falls back to color 0.
        if not found:
            for v in range(n):
                if colors[v] == common.UNCOLORED:
                    colors[v] = 0
    return common.build_assignment(model, colors, palette, metadata)

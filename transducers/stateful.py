"""
Transducers whose reducers carry per run state: counters, flags and
buffers. The state lives on the reducer, which is built fresh every time the
transducer is applied, so a built reducer chain must serve only one run.
"""
from func_prototypes import typed
from transducers.handler import handler
from transducers.reducer import ensure_reduced, is_reduced, unreduced
from transducers.transducer import WrappingReducer


class _Nothing:
    def __repr__(self):
        return 'NOTHING'


NOTHING = _Nothing()


class Taking(WrappingReducer):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.remaining = n

    def step(self, acc, val):
        if self.remaining <= 0:
            return ensure_reduced(acc)
        self.remaining -= 1
        acc = self.rf.step(acc, val)
        if self.remaining <= 0:
            return ensure_reduced(acc)
        return acc


@typed(int)
def take(n):
    """Forward the first n inputs, then stop the run without pulling another."""
    def taker(rf):
        return Taking(n, rf)
    return taker


class TakingWhile(WrappingReducer):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, acc, val):
        if self.pred(val):
            return self.rf.step(acc, val)
        return ensure_reduced(acc)


def take_while(pred):
    p = handler(pred)
    def taker(rf):
        return TakingWhile(p, rf)
    return taker


class TakingNth(WrappingReducer):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.seen = 0

    def step(self, acc, val):
        self.seen += 1
        if self.seen % self.n == 0:
            return self.rf.step(acc, val)
        return acc


@typed(int)
def take_nth(n):
    """Forward every nth input, starting with the nth rather than the first."""
    if n < 1:
        raise ValueError("take_nth needs a positive step, got %d" % n)
    def taker(rf):
        return TakingNth(n, rf)
    return taker


class Dropping(WrappingReducer):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.remaining = n

    def step(self, acc, val):
        if self.remaining > 0:
            self.remaining -= 1
            return acc
        return self.rf.step(acc, val)


@typed(int)
def drop(n):
    def dropper(rf):
        return Dropping(n, rf)
    return dropper


class DroppingWhile(WrappingReducer):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred
        self.dropping = True

    def step(self, acc, val):
        if self.dropping:
            if self.pred(val):
                return acc
            self.dropping = False
        return self.rf.step(acc, val)


def drop_while(pred):
    """Suppress inputs until pred first fails, then forward everything."""
    p = handler(pred)
    def dropper(rf):
        return DroppingWhile(p, rf)
    return dropper


class Deduping(WrappingReducer):

    def __init__(self, rf):
        super().__init__(rf)
        self.prior = NOTHING

    def step(self, acc, val):
        prior, self.prior = self.prior, val
        if prior is not NOTHING and prior == val:
            return acc
        return self.rf.step(acc, val)


def dedupe(rf):
    """Suppress consecutive duplicate inputs. dedupe is itself the transducer, do not call it with no arguments."""
    return Deduping(rf)


class PartitioningBy(WrappingReducer):

    def __init__(self, f, rf):
        super().__init__(rf)
        self.f = f
        self.prior = NOTHING
        self.buffer = []

    def step(self, acc, val):
        key = self.f(val)
        prior, self.prior = self.prior, key
        if prior is NOTHING or prior == key:
            self.buffer.append(val)
            return acc
        chunk, self.buffer = self.buffer, []
        acc = self.rf.step(acc, chunk)
        if not is_reduced(acc):
            self.buffer.append(val)
        return acc

    def complete(self, acc):
        if self.buffer:
            chunk, self.buffer = self.buffer, []
            acc = unreduced(self.rf.step(acc, chunk))
        return self.rf.complete(acc)


def partition_by(fn):
    """Split inputs into lists each time fn(val) changes."""
    f = handler(fn)
    def partitioner(rf):
        return PartitioningBy(f, rf)
    return partitioner


class PartitioningAll(WrappingReducer):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.buffer = []

    def step(self, acc, val):
        self.buffer.append(val)
        if len(self.buffer) < self.n:
            return acc
        chunk, self.buffer = self.buffer, []
        return self.rf.step(acc, chunk)

    def complete(self, acc):
        if self.buffer:
            chunk, self.buffer = self.buffer, []
            acc = unreduced(self.rf.step(acc, chunk))
        return self.rf.complete(acc)


@typed(int)
def partition_all(n):
    """Split inputs into lists of n. The last list may be shorter."""
    if n < 1:
        raise ValueError("partition_all needs a positive size, got %d" % n)
    def partitioner(rf):
        return PartitioningAll(n, rf)
    return partitioner

"""
A transducer is a function from reducer to reducer: given the downstream
reducer rf it returns a new reducer which performs one stage of work and
then delegates to rf. Transducers hold no run state, each application
builds fresh reducers, so one transducer may be used for many runs.
"""
import random
from collections.abc import Mapping as MappingType
from transducers.handler import handler
from transducers.reducer import initial_value


class WrappingReducer:
    """Stage which forwards init and complete to the reducer it wraps."""

    def __init__(self, rf):
        self.rf = rf

    def init(self):
        return initial_value(self.rf)

    def step(self, acc, val):
        return self.rf.step(acc, val)

    def complete(self, acc):
        return self.rf.complete(acc)


class Mapping(WrappingReducer):

    def __init__(self, f, rf):
        super().__init__(rf)
        self.f = f

    def step(self, acc, val):
        return self.rf.step(acc, self.f(val))


def map(fn):
    f = handler(fn)
    def mapped(rf):
        return Mapping(f, rf)
    return mapped


class Filtering(WrappingReducer):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, acc, val):
        if self.pred(val):
            return self.rf.step(acc, val)
        return acc


def filter(pred):
    p = handler(pred)
    def filtered(rf):
        return Filtering(p, rf)
    return filtered


class Removing(Filtering):

    def step(self, acc, val):
        if self.pred(val):
            return acc
        return self.rf.step(acc, val)


def remove(pred):
    """Complement of filter."""
    p = handler(pred)
    def removed(rf):
        return Removing(p, rf)
    return removed


class Keeping(Mapping):

    def step(self, acc, val):
        kept = self.f(val)
        if kept is None:
            return acc
        return self.rf.step(acc, kept)


def keep(fn):
    """
    Forwards fn(val) for every val where it is not None. Unlike filter the
    transformed value is forwarded, so False is kept.
    """
    f = handler(fn)
    def kept(rf):
        return Keeping(f, rf)
    return kept


class KeepingIndexed(Mapping):

    def __init__(self, f, rf):
        super().__init__(f, rf)
        self.index = -1

    def step(self, acc, val):
        self.index += 1
        kept = self.f(self.index, val)
        if kept is None:
            return acc
        return self.rf.step(acc, kept)


def keep_indexed(fn):
    """Like keep, fn is called as fn(index, val). The index counts every input."""
    f = handler(fn, arity=2)
    def kept(rf):
        return KeepingIndexed(f, rf)
    return kept


class Replacing(WrappingReducer):

    def __init__(self, smap, rf):
        super().__init__(rf)
        self.smap = smap

    def step(self, acc, val):
        try:
            val = self.smap[val]
        except (KeyError, TypeError):
            # Missing or unhashable values pass through.
            pass
        return self.rf.step(acc, val)


def replace(smap):
    """
    smap is a mapping of value to replacement, or a sequence which is read
    as a mapping of index to replacement.
    """
    if not isinstance(smap, MappingType):
        smap = dict(enumerate(smap))
    def replaced(rf):
        return Replacing(smap, rf)
    return replaced


class Sampling(WrappingReducer):

    def __init__(self, prob, rng, rf):
        super().__init__(rf)
        self.prob = prob
        self.rng = rng

    def step(self, acc, val):
        if self.rng.random() < self.prob:
            return self.rf.step(acc, val)
        return acc


def random_sample(prob, rng=None):
    """
    Forwards each input with independent probability prob.
    rng is anything with a random() method, defaults to the random module.
    """
    if not 0 <= prob <= 1:
        raise ValueError("Probability %r is not between 0 and 1" % (prob,))
    rng = rng if rng is not None else random
    def sampled(rf):
        return Sampling(prob, rng, rf)
    return sampled

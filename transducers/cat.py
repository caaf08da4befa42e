from transducers.compose import compose
from transducers.reducer import Reduced
from transducers.transduce import reduce_with
from transducers.transducer import WrappingReducer, map


class PreservingReduced:
    """
    Step for the nested reduction over one input of cat. reduce_with unwraps
    a Reduced once, so a stop signalled downstream is wrapped twice to
    survive the nested run and stop the outer one as well.
    """

    def __init__(self, rf):
        self.rf = rf

    def step(self, acc, val):
        ret = self.rf.step(acc, val)
        if isinstance(ret, Reduced):
            return Reduced(ret)
        return ret


class Catting(WrappingReducer):

    def __init__(self, rf):
        super().__init__(rf)
        self.preserving = PreservingReduced(rf)

    def step(self, acc, val):
        return reduce_with(self.preserving, acc, val)


def cat(rf):
    """Flattens each input into the run. Used directly, as in compose(cat)."""
    return Catting(rf)

def mapcat(fn):
    return compose(map(fn), cat)

import logging
from transducers.reducer import NO_INIT, Reduced, as_reducer, initial_value

logger = logging.getLogger(__name__)


def reduce_with(rf, seed, coll):
    """
    Fold coll into seed with rf.step. Stops at the first Reduced and returns
    its value, unwrapped once. Never calls complete.
    str sources iterate per character.
    """
    acc = seed
    for count, val in enumerate(coll, 1):
        acc = rf.step(acc, val)
        if isinstance(acc, Reduced):
            logger.debug("reduced after %d inputs", count)
            return acc.val
    return acc

def transduce(xform, reducer, *args):
    """
    transduce(xform, reducer, [init,] coll)
    xform is a transducer (reducer -> reducer).
    reducer is a Reducer, an object with step, an operation name or a
    (acc, val) -> acc callable.
    init is the seed. Without it the seed comes from the reducer, or from the
    default of a named operation.
    coll is any iterable.
    Completion runs exactly once, however the run ended.
    """
    if len(args) == 1:
        init, coll = NO_INIT, args[0]
    elif len(args) == 2:
        init, coll = args
    else:
        raise TypeError("transduce takes [init,] coll, got %d arguments" % len(args))
    rf = xform(as_reducer(reducer, init))
    acc = initial_value(rf) if init is NO_INIT else init
    logger.debug("transducing %s into %r", type(coll).__name__, reducer)
    return rf.complete(reduce_with(rf, acc, coll))

def into(target, xform, coll):
    """Transduce coll into a list or set target. target is mutated and returned."""
    op = 'conj' if isinstance(target, set) else 'append'
    return transduce(xform, op, target, coll)

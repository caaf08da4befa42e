import logging
from transducers.errors import NoInitialValueProvided, MissingStepCapability
from transducers.operations import BINARY, DEFAULT_INITS, append, identity

logger = logging.getLogger(__name__)


class _NoInit:
    def __repr__(self):
        return 'NO_INIT'


NO_INIT = _NoInit()


class Reduced:
    """Wraps the final accumulation of a run. Nothing steps past it."""
    __slots__ = ('val',)

    def __init__(self, val):
        self.val = val

    def __repr__(self):
        return "Reduced(%r)" % (self.val,)

def is_reduced(x):
    return isinstance(x, Reduced)

def ensure_reduced(x):
    return x if isinstance(x, Reduced) else Reduced(x)

def unreduced(x):
    return x.val if isinstance(x, Reduced) else x


class Reducer:
    """
    Terminal step of a transduction.
    init is the seed of a run. By default a callable init is a factory which
    is called once per run, so list or set seeds are never shared. Pass
    factory=False to use a callable itself as the seed.
    step is a (acc, val) -> acc callable or an operation name.
    complete is applied once to the final accumulation, defaults to identity.
    """

    def __init__(self, init, step, complete=None, factory=True):
        self._init = init
        self._factory = factory
        self._step = _step_of(step)
        self._complete = complete or identity

    def init(self):
        if self._init is NO_INIT:
            raise NoInitialValueProvided(self)
        if self._factory and callable(self._init):
            return self._init()
        return self._init

    def step(self, acc, val):
        return self._step(acc, val)

    def complete(self, acc):
        return self._complete(acc)

def _method_step(name):
    def send(acc, val):
        return getattr(acc, name)(val)
    send.__name__ = "send_" + name
    return send

def _step_of(step):
    if isinstance(step, str):
        op = BINARY.get(step)
        if op is None:
            return _method_step(step)
        return op
    if not callable(step):
        raise MissingStepCapability(step)
    return step

def initial_value(rf):
    """
    Fresh seed for a run of rf, or NoInitialValueProvided.
    A callable init attribute is the init method of the protocol and is called.
    """
    init = getattr(rf, 'init', NO_INIT)
    if callable(init):
        return init()
    if init is NO_INIT:
        raise NoInitialValueProvided(rf)
    return init

def as_reducer(reducer, init=NO_INIT):
    """
    Normalize the terminal argument of transduce into an object with
    init, step and complete.
    reducer may be:
      a Reducer, or any object with a callable step. init and complete are optional.
      an operation name. Named operations carry a default init where one is known.
      a (acc, val) -> acc callable.
    """
    if isinstance(reducer, Reducer):
        return reducer
    if isinstance(reducer, str):
        if reducer not in BINARY:
            logger.debug("%s is not a named operation, calling it on the accumulator", reducer)
        if init is NO_INIT:
            init = DEFAULT_INITS.get(reducer, NO_INIT)
        return Reducer(init, reducer)
    step = getattr(reducer, 'step', None)
    if step is not None:
        if not callable(step):
            raise MissingStepCapability(reducer)
        complete = getattr(reducer, 'complete', None)
        if callable(complete) and hasattr(reducer, 'init'):
            return reducer
        return Reducer(getattr(reducer, 'init', NO_INIT), step, complete)
    if callable(reducer):
        return Reducer(init, reducer)
    raise MissingStepCapability(reducer)


array_of = append

sum_of = lambda acc, val: acc + val
sum_of.__doc__ = """Reducer which computes a sum"""

def joined_with(separator):
    def joint(acc, val):
        if acc == '':
            return str(val)
        else:
            return "%s%s%s" % (acc, separator, val)
    joint.__name__ = "joined_with_" + repr(separator)
    return joint

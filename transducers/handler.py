from operator import methodcaller
from transducers.errors import UnsupportedHandlerKind
from transducers.operations import UNARY, BINARY

CLOSURE = 'closure'
NAMED = 'named'
CAPABILITY = 'capability'

def handler_kind(spec):
    """
    Classify a caller supplied handler. Objects with a process method are
    capabilities even when they are also callable.
    """
    if callable(getattr(spec, 'process', None)):
        return CAPABILITY
    elif callable(spec):
        return CLOSURE
    elif isinstance(spec, str):
        return NAMED
    else:
        raise UnsupportedHandlerKind(spec)

def _named(name, arity):
    if arity == 1:
        op = UNARY.get(name)
        return op if op is not None else methodcaller(name)
    op = BINARY.get(name)
    if op is None:
        raise UnsupportedHandlerKind(name)
    return op

def handler(spec, arity=1):
    """
    Resolve spec into a plain callable taking arity arguments.
    spec is one of:
      a callable, used as is.
      an operation name, looked up in the operation tables. Unknown unary
      names are called as a method on the element.
      an object with a process method, which is bound once.
    """
    kind = handler_kind(spec)
    if kind == CAPABILITY:
        return spec.process
    elif kind == CLOSURE:
        return spec
    else:
        return _named(spec, arity)

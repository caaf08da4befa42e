"""
Read-only tables of the operations which may be named by string instead of
passed as a callable. Unary operations drive handlers, binary operations
drive handlers of arity 2 and terminal reducers.
"""
import operator
from types import MappingProxyType


def identity(x):
    return x

def succ(x):
    return x + 1

def pred(x):
    return x - 1

def even(x):
    return x % 2 == 0

def odd(x):
    return x % 2 == 1

def invert(v):
    return not v


UNARY = MappingProxyType({
    'succ': succ,
    'pred': pred,
    'even': even,
    'odd': odd,
    'identity': identity,
    'negate': operator.neg,
    'not': invert,
    'zero': lambda x: x == 0,
    'pos': lambda x: x > 0,
    'neg': lambda x: x < 0,
    'none': lambda x: x is None,
    'some': lambda x: x is not None,
    'len': len,
    'str': str,
    'int': int,
})

append = lambda acc, val: acc.append(val) or acc
append.__doc__ = \
"""
Appending step which mutates the accumulator rather than reallocating it on
every element.
"""

conj = lambda acc, val: acc.add(val) or acc
conj.__doc__ = """Set accumulating step, mutates the accumulator."""

BINARY = MappingProxyType({
    'append': append,
    'conj': conj,
    'add': operator.add,
    '+': operator.add,
    'sub': operator.sub,
    'subtract': operator.sub,
    '-': operator.sub,
    'mul': operator.mul,
    'multiply': operator.mul,
    '*': operator.mul,
    'truediv': operator.truediv,
    'floordiv': operator.floordiv,
    'concat': operator.add,
    'max': max,
    'min': min,
})

# Mutable seeds are factories so that no two runs share an accumulator.
DEFAULT_INITS = MappingProxyType({
    'append': list,
    'conj': set,
    'add': lambda: 0,
    '+': lambda: 0,
    'sub': lambda: 0,
    'subtract': lambda: 0,
    '-': lambda: 0,
    'mul': lambda: 1,
    'multiply': lambda: 1,
    '*': lambda: 1,
    'concat': str,
})

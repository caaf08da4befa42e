from transducers.errors import \
    TransducerError,        \
    UnsupportedHandlerKind, \
    NoInitialValueProvided, \
    MissingStepCapability
from transducers.reducer import \
    NO_INIT,        \
    Reduced,        \
    Reducer,        \
    array_of,       \
    ensure_reduced, \
    is_reduced,     \
    joined_with,    \
    sum_of,         \
    unreduced
from transducers.transducer import \
    filter,        \
    keep,          \
    keep_indexed,  \
    map,           \
    random_sample, \
    remove,        \
    replace
from transducers.stateful import \
    dedupe,        \
    drop,          \
    drop_while,    \
    partition_all, \
    partition_by,  \
    take,          \
    take_nth,      \
    take_while
from transducers.cat import cat, mapcat
from transducers.compose import compose
from transducers.transduce import into, reduce_with, transduce

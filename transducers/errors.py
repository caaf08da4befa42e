class TransducerError(Exception):
    """Base class for misuse of the transducer protocol."""


class UnsupportedHandlerKind(TransducerError, TypeError):
    """Handler is not a callable, an operation name, or an object with process()."""

    def __init__(self, spec):
        super().__init__("Unsupported handler %r" % (spec,))
        self.spec = spec


class NoInitialValueProvided(TransducerError, ValueError):
    def __init__(self, reducer):
        super().__init__("No init provided for %r" % (reducer,))
        self.reducer = reducer


class MissingStepCapability(TransducerError, TypeError):
    def __init__(self, reducer):
        super().__init__("%r has no usable step" % (reducer,))
        self.reducer = reducer

"""
compose(t1, ..., tn)(rf) is t1(t2(...tn(rf))). tn wraps rf first and t1 is
the outermost reducer, so inputs pass through t1 first and tn last.
Fixed arity compositions avoid looping on every application.
"""
from functools import reduce


def _comp_0():
    def _identity(rf):
        return rf
    return _identity


def _comp_1(a):
    return a


def _comp_2(a, b):
    def _composed2(rf):
        return a(b(rf))
    return _composed2


def _comp_3(a, b, c):
    def _composed3(rf):
        return a(b(c(rf)))
    return _composed3


def _comp_4(a, b, c, d):
    def _composed4(rf):
        return a(b(c(d(rf))))
    return _composed4


def _comp_5(a, b, c, d, e):
    def _composed5(rf):
        return a(b(c(d(e(rf)))))
    return _composed5


def _comp_6(a, b, c, d, e, f):
    def _composed6(rf):
        return a(b(c(d(e(f(rf))))))
    return _composed6


def _comp_7(a, b, c, d, e, f, g):
    def _composed7(rf):
        return a(b(c(d(e(f(g(rf)))))))
    return _composed7


def _comp_8(a, b, c, d, e, f, g, h):
    def _composed8(rf):
        return a(b(c(d(e(f(g(h(rf))))))))
    return _composed8


_comp_fns = [
    _comp_0,
    _comp_1,
    _comp_2,
    _comp_3,
    _comp_4,
    _comp_5,
    _comp_6,
    _comp_7,
    _comp_8,
]


def _comp_n(xforms):
    backwards = tuple(reversed(xforms))
    def _composed(rf):
        return reduce(lambda acc, xform: xform(acc), backwards, rf)
    return _composed


def compose(*xforms):
    n = len(xforms)
    if n < len(_comp_fns):
        return _comp_fns[n](*xforms)
    return _comp_n(xforms)

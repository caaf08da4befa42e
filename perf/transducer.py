import builtins
import functools
import timeit
from tabulate import tabulate
from transducers import NO_INIT, Reducer, compose, filter, map, reduce_with, take, transduce


def isEven(n):
    return n % 2 == 0

def inc(n):
    return n + 1


class Even:
    def process(self, n):
        return n % 2 == 0


class Inc:
    def process(self, n):
        return n + 1


def performance_compare(*cases, case_args=[], timeit_kwargs={}):
    results = {}
    for case in cases:
        name = case.__name__
        case = functools.partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))

def filter_with_object(ns):
    return transduce(filter(Even()), 'append', ns)

def filter_with_name(ns):
    return transduce(filter('even'), 'append', ns)

def filter_with_closure(ns):
    return transduce(filter(isEven), 'append', ns)

def filter_comprehension(ns):
    return [n for n in ns if isEven(n)]

def map_with_object(ns):
    return transduce(map(Inc()), 'append', ns)

def map_with_name(ns):
    return transduce(map('succ'), 'append', ns)

def map_with_closure(ns):
    return transduce(map(inc), 'append', ns)

def map_builtin(ns):
    return list(builtins.map(inc, ns))

def plus(x, y):
    return x + y

def sum_functools(ns):
    return functools.reduce(plus, ns, 0)

def sum_reduce_with(ns):
    return reduce_with(Reducer(NO_INIT, plus), 0, ns)

def sum_loop(ns):
    total = 0
    for n in ns:
        total += n
    return total

def inc_even_take_loop(ns):
    total = 0
    seen = 0
    for n in ns:
        n = inc(n)
        if isEven(n):
            total += n
            seen += 1
            if seen == 1000:
                break
    return total

inc_even_take = compose(map(inc), filter(isEven), take(1000))

def inc_even_take_transduce(ns):
    return transduce(inc_even_take, 'add', ns)


oneK = range(1000)
hundredK = range(100000)

def test_cases_agree():
    assert filter_with_object(oneK) == filter_with_name(oneK) == filter_with_closure(oneK) == filter_comprehension(oneK)
    assert map_with_object(oneK) == map_with_name(oneK) == map_with_closure(oneK) == map_builtin(oneK)
    assert sum_functools(oneK) == sum_reduce_with(oneK) == sum_loop(oneK)
    assert inc_even_take_loop(hundredK) == inc_even_take_transduce(hundredK)

def test_filter():
    performance_compare(filter_with_object,
                        filter_with_name,
                        filter_with_closure,
                        filter_comprehension,
                        case_args=[oneK],
                        timeit_kwargs={'number': 1000})

def test_map():
    performance_compare(map_with_object,
                        map_with_name,
                        map_with_closure,
                        map_builtin,
                        case_args=[oneK],
                        timeit_kwargs={'number': 1000})

def test_reduce():
    performance_compare(sum_functools,
                        sum_reduce_with,
                        sum_loop,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_early_termination():
    performance_compare(inc_even_take_loop,
                        inc_even_take_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 1000})

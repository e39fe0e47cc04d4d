from pytest import Item, fixture

from rpncalc.machine import Machine


@fixture
def machine():
    return Machine()


@fixture
def verbose_machine():
    '''
    Machine tracing to stderr, to be inspected through capsys.
    '''
    return Machine(verbose=True)


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, in case we later need to audit a run.

    Needs enable_assertion_pass_hook. Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))

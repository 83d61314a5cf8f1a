from pytest import Item, fixture

from minirepl.todo.storage import TodoFile


FIXED_TIME = '2024-01-20 12:00'


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Only active with enable_assertion_pass_hook; use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def clock():
    '''
    Timestamp source that always answers FIXED_TIME.
    '''
    return lambda: FIXED_TIME


@fixture
def todo_path(tmp_path):
    return tmp_path / 'todos.txt'


@fixture
def todo_file(todo_path):
    return TodoFile(todo_path)

import regex


TASK_ID = regex.compile(r'\+?[0-9]+')


class TodoError(Exception):
    pass


class TaskNotFound(TodoError):
    def __init__(self, task_id):
        super().__init__('Task with ID {} not found!'.format(task_id))
        self.task_id = task_id


class TaskAlreadyCompleted(TodoError):
    def __init__(self, task_id):
        super().__init__('Task {} is already completed!'.format(task_id))
        self.task_id = task_id


def parse_id(text):
    '''
    Return text as a non-negative integer id, or None.
    '''
    if TASK_ID.fullmatch(text) is None:
        return None
    return int(text)

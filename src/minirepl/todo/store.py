from collections import namedtuple
from datetime import datetime
import logging

from .models import Task
from .util import TaskNotFound, TaskAlreadyCompleted


logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M'

Summary = namedtuple('Summary', ['tasks', 'completed', 'pending'])


def timestamp():
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class TodoList:
    '''
    Ordered collection of tasks plus the next id to hand out.

    Ids start at 1 and only grow; deleting a task never frees its id.
    '''

    def __init__(self, tasks=(), next_id=1, clock=timestamp):
        '''
        :param tasks: Initial tasks, in display order.
        :param next_id: Id for the next added task. Raised above every id
            in tasks if needed.
        :param clock: Callable returning the creation label for new tasks.
        '''
        self.tasks = list(tasks)
        self.next_id = max([next_id, 1] + [task.id + 1 for task in self.tasks])
        self.clock = clock

    def __len__(self):
        return len(self.tasks)

    def __iter__(self):
        return iter(self.tasks)

    def _index(self, task_id):
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                return index
        raise TaskNotFound(task_id)

    def add(self, description):
        '''
        Append a new pending task and return it.
        '''
        task = Task(id=self.next_id,
                    description=description,
                    completed=False,
                    created_at=self.clock())
        self.tasks.append(task)
        self.next_id += 1
        logger.debug('added task %d', task.id)
        return task

    def complete(self, task_id):
        '''
        Mark a task completed.

        Raises TaskNotFound or TaskAlreadyCompleted.
        '''
        task = self.tasks[self._index(task_id)]
        if task.completed:
            raise TaskAlreadyCompleted(task_id)
        task.completed = True
        return task

    def delete(self, task_id):
        '''
        Remove a task, keeping the others in order.

        Raises TaskNotFound.
        '''
        return self.tasks.pop(self._index(task_id))

    def summary(self):
        '''
        Snapshot of the tasks with completed and pending counts.
        '''
        completed = sum(1 for task in self.tasks if task.completed)
        return Summary(tasks=list(self.tasks),
                       completed=completed,
                       pending=len(self.tasks) - completed)

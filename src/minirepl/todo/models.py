from dataclasses import dataclass


MAX_DESCRIPTION = 500


@dataclass
class Task:
    '''
    A single todo item.

    Fields:
        id: Sequential integer id, never reused once assigned.
        description: Free text, at most MAX_DESCRIPTION characters.
        completed: Starts False; only ever goes to True.
        created_at: Timestamp label, shown verbatim.
    '''
    id: int
    description: str
    completed: bool = False
    created_at: str = ''

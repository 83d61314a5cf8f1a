from functools import wraps


class RPNError(Exception):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts low-level exceptions to user-facing RPNErrors.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise RPNError(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator


def format_number(n, precision=None):
    '''
    Render a stack value: integral values without a fractional part.
    '''
    if precision is not None:
        n = round(n, precision)
    if n.is_integer():
        return '{:.0f}'.format(n)
    return repr(n)

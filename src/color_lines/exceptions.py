class BaseColorLinesError(Exception):
    pass

class GraphError(Exception):
    pass


class InvalidParameterError(GraphError, ValueError):
    pass


class GraphFormatError(GraphError, ValueError):

    def __init__(self, message, line_number=None) -> None:
        if line_number is not None:
            message = f'line {line_number}: {message}'
        super().__init__(message)
        self.line_number = line_number


class SinkIOError(GraphError, IOError):
    ''' Failure to open, write or close a graph file. The underlying OSError is chained as __cause__.'''

    def __init__(self, filepath, reason) -> None:
        super().__init__(f'{filepath}: {reason}')
        self.filepath = filepath

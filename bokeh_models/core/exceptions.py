class ModelValidationError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class MissingDataSource(ModelValidationError):
    pass


class MissingPlot(ModelValidationError):
    pass


class BuilderConsumedException(Exception):
    pass


class ChartDescriptionException(Exception):
    pass

class ZipfError(Exception):
    pass


class ParameterRangeError(ZipfError, ValueError):
    pass


class RejectionLimitError(ZipfError, RuntimeError):
    def __init__(self, attempts: int):
        super().__init__(f"no candidate accepted after {attempts} rejections")
        self.attempts = attempts

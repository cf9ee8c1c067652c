# timestamper/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (paths, config values).
    Should NOT print traceback.
    """


class CorruptTimestampsError(ValueError):
    """
    A timestamps file ended in the middle of a record.
    """


class BuildNotFoundError(KeyError):
    """
    No timestamps file exists for the requested build id.
    """

    def __init__(self, build_id: str):
        super().__init__(build_id)
        self.build_id = build_id

class AssignmentError(RuntimeError):
    pass

class ResultsError(Exception):
    """The generated test results file is missing or unreadable."""

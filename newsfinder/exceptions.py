class NewsFinderError(Exception):
    pass


class ValidationError(NewsFinderError):
    pass


class SourceUnavailable(NewsFinderError):
    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class NetworkError(SourceUnavailable):
    pass


class ParsingError(SourceUnavailable):
    pass


class ExtractionError(NewsFinderError):
    pass

#Exceptions raised by the maze generator package


class MazeError(Exception):
    pass


class UnsolvableMazeError(MazeError):
    #A generator returned a maze with no path from entry to exit
    #This is a bug in the generator, callers are not expected to recover from it
    pass


class UnknownAlgorithmError(MazeError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown algorithm: {self.name}"


class ConfigError(MazeError, ValueError):
    pass

"""
Error Types Module.

All failures of a conversion run derive from ConversionError so the command
line entry point can report them uniformly. Each one also subclasses the
built-in exception a caller would naturally expect for that kind of problem.
"""


class ConversionError(Exception):
    """Base class for every error raised while converting an input document."""

    kind = "ConversionError"

    def __str__(self) -> str:
        return f"{self.kind}: {super().__str__()}"


class MalformedGeometryError(ConversionError, ValueError):
    """The flat geometry array does not hold exactly three values per symbol."""

    kind = "MalformedGeometryError"

    def __init__(self, n_symbols: int, n_coords: int, message: str = None):
        super().__init__(
            message
            or f"'molecule.geometry' has {n_coords} values but 'molecule.symbols' "
            f"has {n_symbols} entries (expected {3 * n_symbols} coordinates)."
        )
        self.n_symbols = n_symbols
        self.n_coords = n_coords


class SchemaLengthMismatchError(ConversionError, ValueError):
    """A fragment array length disagrees with the declared atom/fragment count."""

    kind = "SchemaLengthMismatchError"

    def __init__(self, field: str, expected, actual, message: str = None):
        super().__init__(message or f"'{field}' has length {actual}, expected {expected}.")
        self.field = field
        self.expected = expected
        self.actual = actual


class FragmentIndexOutOfRangeError(ConversionError, ValueError):
    """An atom references a fragment id that does not exist."""

    kind = "FragmentIndexOutOfRangeError"

    def __init__(self, atom_index: int, fragid, nfrag: int):
        super().__init__(
            f"Atom {atom_index} has fragid {fragid!r}; valid ids are 1..{nfrag}."
        )
        self.atom_index = atom_index
        self.fragid = fragid
        self.nfrag = nfrag


class MissingFieldError(ConversionError, KeyError):
    """A required field is absent from the input document."""

    kind = "MissingFieldError"

    def __init__(self, field: str):
        # KeyError would repr() the message, so go through Exception directly
        Exception.__init__(self, f"Required field '{field}' not found in input.")
        self.field = field

    def __str__(self) -> str:
        return f"{self.kind}: {self.args[0]}"


class InputFileError(ConversionError):
    """The input file is missing, unreadable or not a JSON document."""

    kind = "InputFileError"

    def __init__(self, path, reason: str):
        super().__init__(f"Cannot read input file '{path}': {reason}")
        self.path = path
        self.reason = reason


class UsageError(ConversionError, ValueError):
    """The command line was invoked with missing or extra arguments."""

    kind = "UsageError"


class InvalidFieldTypeError(ConversionError, TypeError):
    """A section of the input document has the wrong JSON type."""

    kind = "InvalidFieldTypeError"

    def __init__(self, field: str, expected: str, value):
        super().__init__(f"'{field}' must be {expected}, got {type(value).__name__}.")
        self.field = field
        self.expected = expected


class OutputFileError(ConversionError):
    """An output file could not be written."""

    kind = "OutputFileError"

    def __init__(self, path, reason: str):
        super().__init__(f"Cannot write output file '{path}': {reason}")
        self.path = path
        self.reason = reason

class LisperError(Exception):
    """ Base class for all Lisper errors"""
    pass


class LisperUndefinedVariable(LisperError):
    """ Raised when a symbol is looked up before it is bound"""

    def __init__(self, name):
        super().__init__(f"Undefined variable `{name}`")
        self.name = str(name)


class LisperUndefinedPrimitive(LisperError):
    """ Raised when an unbound symbol in head position names no primitive"""

    def __init__(self, name):
        super().__init__(f"Undefined primitive function {str(name)!r}")
        self.name = str(name)


class LisperSyntaxError(LisperError):
    """ Raised when a special form or source text is malformed"""


class LisperDuplicateArgument(LisperError):
    """ Raised when a parameter list names the same symbol twice"""

    def __init__(self, names):
        self.names = [str(n) for n in names]
        super().__init__(f"Duplicate argument {self.names} in function definition")


class LisperArityError(LisperError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, expected: int, got: int, message: str | None = None):
        super().__init__(message or f"Expected {expected} arguments; got {got} instead")
        self.expected = expected
        self.got = got


class LisperUnspecifiedReturn(LisperError):
    """ Raised when a one-armed if takes its missing branch"""

    def __init__(self):
        super().__init__("Unspecified return value")


class LisperNotApplicable(LisperError):
    """ Raised when a non-procedure value is called"""

    def __init__(self, value):
        super().__init__(f"Cannot apply non-procedure {value!r}")
        self.value = value


class LisperUnknownForm(LisperError):
    """ Raised when an expression matches no evaluation rule"""

    def __init__(self, form):
        super().__init__(f"Unknown form: {form!r}")
        self.form = form


class LisperTypeError(LisperError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""

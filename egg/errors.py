

class EggError(Exception):
    """ Base class for all Egg errors"""
    pass

class EggSyntaxError(EggError):
    """ Raised when source text or a special form is malformed"""
    pass

class EggReferenceError(EggError):
    """ Raised when a variable is not bound anywhere in the environment chain"""
    pass

class EggTypeError(EggError):
    """ Raised when a value is used with the wrong type, e.g. applying a non-function"""

class EggArityError(EggTypeError):
    """ Raised when the number of arguments passed to a function is incorrect"""

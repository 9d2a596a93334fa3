class InvalidSelector(ValueError):
    '''Raised for an unknown output mode, sub-equation, accuracy level,
    region, temperature scale, domain policy, quantity or formula tag.'''

class ShapeMismatch(ValueError):
    '''Raised when input arrays cannot be broadcast to a common shape.'''

class MissingInput(ValueError):
    '''Raised when a sample lacks an input that the requested formula needs.'''

class DomainError(ValueError):
    '''Raised for inputs outside a formula's valid domain when the
    domain policy is set to "raise".'''

class TemperatureDomainError(DomainError):
    '''Raised when an IPTS-68 temperature has no IPTS-48 equivalent.'''

class DomainWarning(UserWarning):
    '''Issued for inputs outside a formula's (or region's) valid domain.
    The computation still proceeds.'''

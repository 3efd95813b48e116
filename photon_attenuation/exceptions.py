class AttenuationError(Exception):
    """Base class for errors raised while building an attenuation evaluator."""

    pass


class InvalidElementError(AttenuationError, ValueError):
    """Represents an atomic number that is not a number or lies outside [1, 100]."""

    pass


class DegenerateCompositionError(AttenuationError, ValueError):
    """Represents a composition whose mass fractions sum to zero."""

    pass


class InvalidMaterialError(AttenuationError, ValueError):
    """Represents a material description that cannot be built (density, lengths, fractions)."""

    pass


class OutOfRangeEnergyWarning(UserWarning):
    """Issued when an energy falls outside the range covered by the reference data."""

    pass

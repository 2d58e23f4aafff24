"""Exceptions raised while converting FMV movies to FM2."""


class ConversionError(Exception):
    """Base class for all conversion failures."""

    pass


class FmvDecodeError(ConversionError):
    """The FMV data could not be decoded."""

    pass


class TruncatedHeaderError(FmvDecodeError):
    """FMV data is shorter than the fixed header."""

    pass


class BadSignatureError(FmvDecodeError):
    """FMV data does not start with the FMV signature."""

    pass


class UnsupportedSavestateRecordingError(FmvDecodeError):
    """The movie starts from a savestate instead of power-on."""

    pass


class NoControllersRecordedError(FmvDecodeError):
    """Frame data is present but no controller is marked as recorded."""

    pass


class CorruptFrameDataError(FmvDecodeError):
    """Frame data length does not match the recorded controller layout."""

    pass


class Fm2EncodeError(ConversionError):
    """A recording could not be serialized as FM2."""

    pass


class UnsupportedBodyFormatError(Fm2EncodeError):
    """Only binary FM2 bodies can be written."""

    pass


class InvalidRomError(ConversionError):
    """The ROM image is too small to checksum."""

    pass

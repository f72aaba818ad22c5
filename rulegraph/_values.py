# -*- test-case-name: rulegraph._test.test_values -*-

"""
Display values carried by states.

A state's value is one of a closed set of types: L{int}, L{Float32},
L{float} (64-bit), L{bool} or L{str}.  Anything else is rejected.
"""

import struct

import attr


class UnsupportedValue(TypeError):
    """
    A state was given a C{value} whose type cannot be rendered.

    @param value: the offending value.
    """

    def __init__(self, value):
        self.value = value
        super(UnsupportedValue, self).__init__(
            "unsupported state value {!r} of type {}".format(
                value, type(value).__name__)
        )


def _single(value):
    return struct.unpack("f", struct.pack("f", float(value)))[0]


@attr.s(frozen=True)
class Float32(object):
    """
    A 32-bit float.  The wrapped number is rounded to single precision.
    """
    value = attr.ib(converter=_single)

    def __float__(self):
        return self.value


_SUPPORTED = (bool, int, Float32, float, str)


def checkValue(value):
    """
    Make sure C{value} is renderable.

    @raise UnsupportedValue: if it is not.
    """
    if not isinstance(value, _SUPPORTED):
        raise UnsupportedValue(value)
    return value


def renderValue(value):
    """
    Render a state value as text.

    @rtype: L{str}
    """
    # bool before int; True is an int too.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Float32):
        return "%f" % (value.value,)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, str):
        return value
    raise UnsupportedValue(value)

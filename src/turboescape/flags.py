"""Feature flags for escaping behavior.

Simple module-level booleans, read at call time so tests can flip them
with ``unittest.mock.patch.object``. Do not change them in the middle of
a streaming call.
"""

# Decode a \uD83D\uDE00 escape pair as one astral code point instead of two surrogates
JOIN_SURROGATE_ESCAPES = True

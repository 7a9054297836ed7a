## exceptions raised by polyrule

## Copyright (c) 2026 polyrule contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Exception hierarchy for polyrule.

Every error the library detects itself derives from ``PolyruleError``.
Each concrete class also derives from the builtin exception a caller
would naturally expect, so ``except ValueError`` keeps working for
malformed data.  Failures writing to an output sink are not wrapped:
the ``OSError`` raised by the sink propagates unchanged.
"""


class PolyruleError(Exception):
    """Base exception for polyrule errors."""
    pass


class MeshError(PolyruleError, ValueError):
    """A mesh violates the vertex/face invariants at construction."""
    pass


class RuleError(PolyruleError, TypeError):
    """A value cannot be used as, or did not produce, a Rule."""
    pass


class ObjFormatError(PolyruleError, ValueError):
    """An OBJ record could not be parsed."""

    def __init__(self, message: str, line_number: int = 0):
        self.line_number = line_number
        if line_number:
            message = f"line {line_number}: {message}"
        super().__init__(message)

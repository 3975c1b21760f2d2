"""tools - pure utilities, zero evangeliser imports."""

from evangeliser.tools.regexutil import (
    compile_rule, validate_rule, explain_rule, line_starts, line_of,
)

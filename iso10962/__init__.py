"""iso10962 — ISO 10962 CFI code decoder and encoder.

parse(raw) -> Ok[Code] | Err[CfiError]; serialize(code) -> bytes.
"""

from iso10962.code import (
    AnyCategory as AnyCategory,
)
from iso10962.code import (
    CATEGORY_TAGS as CATEGORY_TAGS,
)
from iso10962.code import (
    Code as Code,
)
from iso10962.code import (
    parse as parse,
)
from iso10962.code import (
    serialize as serialize,
)
from iso10962.core.config import (
    DEFAULT_CONFIG as DEFAULT_CONFIG,
)
from iso10962.core.config import (
    STRICT_CONFIG as STRICT_CONFIG,
)
from iso10962.core.config import (
    CFI_LENGTH as CFI_LENGTH,
)
from iso10962.core.config import (
    DecoderConfig as DecoderConfig,
)
from iso10962.core.errors import (
    CfiError as CfiError,
)
from iso10962.core.errors import (
    InvalidAttribute as InvalidAttribute,
)
from iso10962.core.errors import (
    InvalidCategory as InvalidCategory,
)
from iso10962.core.errors import (
    InvalidGroup as InvalidGroup,
)
from iso10962.core.errors import (
    InvalidLength as InvalidLength,
)
from iso10962.core.result import (
    Err as Err,
)
from iso10962.core.result import (
    Ok as Ok,
)
from iso10962.core.result import (
    Result as Result,
)
from iso10962.core.result import (
    unwrap as unwrap,
)
from iso10962.guidelines import (
    check_guidelines as check_guidelines,
)
from iso10962.guidelines import (
    guideline_violations as guideline_violations,
)

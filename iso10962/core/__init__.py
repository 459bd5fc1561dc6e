"""iso10962.core — result, error and configuration types."""

from iso10962.core.config import (
    ATTRIBUTE_POSITIONS as ATTRIBUTE_POSITIONS,
)
from iso10962.core.config import (
    CATEGORY_INDEX as CATEGORY_INDEX,
)
from iso10962.core.config import (
    CFI_LENGTH as CFI_LENGTH,
)
from iso10962.core.config import (
    DEFAULT_CONFIG as DEFAULT_CONFIG,
)
from iso10962.core.config import (
    GROUP_INDEX as GROUP_INDEX,
)
from iso10962.core.config import (
    STRICT_CONFIG as STRICT_CONFIG,
)
from iso10962.core.config import (
    UNDEFINED_CHAR as UNDEFINED_CHAR,
)
from iso10962.core.config import (
    DecoderConfig as DecoderConfig,
)
from iso10962.core.errors import (
    CfiError as CfiError,
)
from iso10962.core.errors import (
    FieldViolation as FieldViolation,
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
from iso10962.core.errors import (
    ValidationError as ValidationError,
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
    sequence as sequence,
)
from iso10962.core.result import (
    unwrap as unwrap,
)

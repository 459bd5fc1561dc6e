"""iso10962.taxonomy — decoding engine and per-category schema tables."""

from iso10962.taxonomy.base import (
    Attribute as Attribute,
)
from iso10962.taxonomy.base import (
    AttributeGroup as AttributeGroup,
)
from iso10962.taxonomy.base import (
    Category as Category,
)
from iso10962.taxonomy.common import (
    Form as Form,
)
from iso10962.taxonomy.common import (
    NotApplicable as NotApplicable,
)
from iso10962.taxonomy.common import (
    Standardized as Standardized,
)
from iso10962.taxonomy.unstructured import (
    UnstructuredCategory as UnstructuredCategory,
)

"""zod dialect (fluent builders, ``Schema`` suffix)."""

from __future__ import annotations

from dto_forge.dialects.base import Dialect
from dto_forge.registry.mappings import CustomTypeMapping

ZOD = Dialect(
    name="typescript-zod",
    description="TypeScript/Zod",
    symbol_suffix="Schema",
    base_import="import { z } from 'zod';",
    primitives={
        "string": "z.string()",
        "number": "z.number()",
        "integer": "z.number()",
        "boolean": "z.boolean()",
        "unknown": "z.unknown()",
    },
    array_template="z.array({element})",
    enum_template="z.enum([{members}])",
    enum_member_template="{literal}",
    record_expr="z.record(z.unknown())",
    object_call="z.object",
    nullable_template="{expr}.nullable()",
    optional_template="{expr}.optional()",
    unknown_format_template="{expr} /* format: {format} */",
    static_type_template="z.infer<typeof {symbol}>",
    partial_template="{symbol}.partial()",
    validate_template="{symbol}.safeParse(data)",
    guard_template="{symbol}.safeParse(data).success",
    default_mappings={
        "date-time": CustomTypeMapping(validator_expr="z.string().datetime()"),
        "uuid": CustomTypeMapping(validator_expr="z.string().uuid()"),
        "email": CustomTypeMapping(validator_expr="z.string().email()"),
        "uri": CustomTypeMapping(validator_expr="z.string().url()"),
        "url": CustomTypeMapping(validator_expr="z.string().url()"),
        "date": CustomTypeMapping(validator_expr="z.string().date()"),
    },
    example_mappings={
        "date-time": CustomTypeMapping(
            validator_expr="DateTimeSchema",
            scalar_type="DateTime",
            import_statement="import { DateTimeSchema } from './datetime-utils';",
        ),
        "uuid": CustomTypeMapping(
            validator_expr="z.string().uuid().brand('UUID')",
            scalar_type="UUID",
        ),
        "email": CustomTypeMapping(
            validator_expr="EmailSchema",
            scalar_type="Email",
            import_statement="import { EmailSchema } from './branded-types';",
        ),
    },
    package_dependencies={"zod": "^3.22.4"},
    default_package_name="generated-zod-schemas",
)

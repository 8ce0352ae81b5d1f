"""io-ts dialect (functional combinators, ``Codec`` suffix)."""

from __future__ import annotations

from dto_forge.dialects.base import Dialect
from dto_forge.registry.mappings import CustomTypeMapping

IO_TS = Dialect(
    name="typescript",
    description="TypeScript/io-ts",
    symbol_suffix="Codec",
    base_import="import * as t from 'io-ts';",
    primitives={
        "string": "t.string",
        "number": "t.number",
        "integer": "t.number",
        "boolean": "t.boolean",
        "unknown": "t.unknown",
    },
    array_template="t.array({element})",
    enum_template="t.keyof({{{members}}})",
    enum_member_template="{literal}: null",
    record_expr="t.record(t.string, t.unknown)",
    object_call="t.type",
    nullable_template="t.union([{expr}, t.null])",
    optional_template="t.union([{expr}, t.undefined])",
    unknown_format_template="{expr} /* format: {format} */",
    static_type_template="t.TypeOf<typeof {symbol}>",
    partial_template="t.partial({symbol}.props)",
    validate_template="{symbol}.decode(data)",
    guard_template="{symbol}.is(data)",
    default_mappings={
        "date-time": CustomTypeMapping(
            validator_expr="DateFromISOString",
            scalar_type="Date",
            import_statement="import { DateFromISOString } from 'io-ts-types';",
        ),
        "uuid": CustomTypeMapping(validator_expr="t.string"),
        "email": CustomTypeMapping(validator_expr="t.string"),
        "uri": CustomTypeMapping(validator_expr="t.string"),
        "date": CustomTypeMapping(validator_expr="t.string"),
    },
    example_mappings={
        "date-time": CustomTypeMapping(
            validator_expr="DateTimeString",
            scalar_type="DateTimeString",
            import_statement="import { DateTimeString } from './branded-types';",
        ),
        "uuid": CustomTypeMapping(
            validator_expr="UUID.codec",
            scalar_type="UUID",
            import_statement="import { UUID } from './branded-types';",
        ),
        "email": CustomTypeMapping(
            validator_expr="EmailString.codec",
            scalar_type="EmailString",
            import_statement="import { EmailString } from './branded-types';",
        ),
    },
    package_dependencies={
        "fp-ts": "^2.16.0",
        "io-ts": "^2.2.20",
        "io-ts-types": "^0.5.19",
    },
    default_package_name="generated-schemas",
)

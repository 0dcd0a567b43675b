"""Intermediate schema model produced by introspection."""

from typing import Optional, List, Dict, Any, Union
from dataclasses import dataclass, field

from .type_mappers import SemanticType

# Field name every usable primary key is canonicalized to
IDENTITY_FIELD = "Id"
# Field name for a non-key column that would otherwise collide with IDENTITY_FIELD
RENAMED_IDENTITY_FIELD = "Id_RENAME"


def camel_case(name: str) -> str:
    """Convert a snake_case identifier to CamelCase (user_id -> UserId)."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


@dataclass(frozen=True)
class Reference:
    """A column type pointing at another generated entity."""
    entity: str
    nullable: bool = True

    def __str__(self) -> str:
        return ("*" if self.nullable else "") + self.entity


ColumnType = Union[SemanticType, Reference]


@dataclass
class ForeignKey:
    """Represents a foreign key column of a table."""
    name: str
    ref_schema: str
    ref_table: str
    ref_column: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "ref_schema": self.ref_schema,
            "ref_table": self.ref_table,
            "ref_column": self.ref_column,
        }


@dataclass
class OrmTag:
    """Derived annotations for a single column.

    auto_now means the column is refreshed on update; auto_now_add means it
    is only set on insert. At most one of them is set.
    """
    auto: bool = False
    pk: bool = False
    null: bool = False
    index: bool = False
    unique: bool = False
    column: str = ""
    size: str = ""
    digits: str = ""
    decimals: str = ""
    auto_now: bool = False
    auto_now_add: bool = False
    type: str = ""
    default: str = ""
    rel_fk: bool = False
    table_fk: str = ""
    comment: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return only the annotations that are set."""
        return {key: value for key, value in self.__dict__.items() if value}


@dataclass
class Column:
    """Represents a generated field mapped to a database column."""
    name: str
    type: ColumnType
    tag: OrmTag = field(default_factory=OrmTag)

    @property
    def is_reference(self) -> bool:
        return isinstance(self.type, Reference)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": str(self.type) if self.is_reference else self.type.value,
            "tag": self.tag.to_dict(),
        }


@dataclass
class Table:
    """Represents a database table and everything derived from it."""
    name: str
    pk: str = ""
    pk_type: Optional[SemanticType] = None
    uk: List[str] = field(default_factory=list)
    fk: Dict[str, ForeignKey] = field(default_factory=dict)
    columns: List[Column] = field(default_factory=list)
    import_time_pkg: bool = False
    has_soft_delete: bool = False
    degraded_foreign_keys: List[ForeignKey] = field(default_factory=list)

    @property
    def entity_name(self) -> str:
        """Name of the entity generated for this table."""
        return camel_case(self.name)

    def get_column(self, source_name: str) -> Optional[Column]:
        """Find a column by its source column name."""
        for column in self.columns:
            if column.tag.column == source_name:
                return column
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "entity": self.entity_name,
            "pk": self.pk,
            "pk_type": self.pk_type.value if self.pk_type else None,
            "uk": list(self.uk),
            "fk": {name: fk.to_dict() for name, fk in self.fk.items()},
            "columns": [column.to_dict() for column in self.columns],
            "import_time_pkg": self.import_time_pkg,
            "has_soft_delete": self.has_soft_delete,
            "degraded_foreign_keys": [fk.to_dict() for fk in self.degraded_foreign_keys],
        }

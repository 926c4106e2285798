from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Tuple, Union

NOTE_FIELDS = ("title", "content")


@dataclass(frozen=True)
class ValidationReport:
    """Erreurs d'une passe de validation. Jamais persisté, jamais muté."""

    form_errors: Tuple[str, ...] = ()
    field_errors: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        # vue en lecture seule: le rapport ne change plus après construction
        frozen = {name: tuple(messages) for name, messages in self.field_errors.items()}
        object.__setattr__(self, "form_errors", tuple(self.form_errors))
        object.__setattr__(self, "field_errors", MappingProxyType(frozen))

    def __hash__(self):
        return hash((self.form_errors, tuple(sorted(self.field_errors.items()))))

    @classmethod
    def empty(cls, field_names=NOTE_FIELDS) -> "ValidationReport":
        return cls(field_errors={name: () for name in field_names})

    def with_field_error(self, field_name: str, message: str) -> "ValidationReport":
        errors = dict(self.field_errors)
        errors[field_name] = errors.get(field_name, ()) + (message,)
        return replace(self, field_errors=errors)

    def with_form_error(self, message: str) -> "ValidationReport":
        return replace(self, form_errors=self.form_errors + (message,))

    @property
    def has_errors(self) -> bool:
        return bool(self.form_errors) or any(self.field_errors.values())


@dataclass(frozen=True)
class Success:
    redirect_path: str


@dataclass(frozen=True)
class Failure:
    report: ValidationReport


MutationOutcome = Union[Success, Failure]

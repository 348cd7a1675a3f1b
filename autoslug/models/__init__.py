from autoslug.models.changeset import Changeset, FieldError, UniqueConstraint

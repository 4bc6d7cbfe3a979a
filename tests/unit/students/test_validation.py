"""Unit tests for student draft validation."""

import pydantic
import pytest

from roster.students import StudentDraft, ValidationError, is_valid_email, validate_draft


@pytest.mark.unit
class TestValidateDraft:
    """Tests for validate_draft."""

    def test_valid_draft(self, ana: dict[str, str]) -> None:
        draft = validate_draft(ana)

        assert draft.nome == "Ana Silva"
        assert draft.matricula == "A1"
        assert draft.email == "ana@x.com"
        assert draft.data_nascimento == "2000-01-01"

    def test_accepts_python_field_name(self, ana: dict[str, str]) -> None:
        """data_nascimento works as well as dataNascimento."""
        ana["data_nascimento"] = ana.pop("dataNascimento")

        draft = validate_draft(ana)

        assert draft.data_nascimento == "2000-01-01"

    def test_ignores_id_and_unknown_keys(self, ana: dict[str, str]) -> None:
        draft = validate_draft({**ana, "id": "abc", "extra": "x"})

        assert not hasattr(draft, "id")

    def test_accepts_existing_draft(self, ana: dict[str, str]) -> None:
        draft = validate_draft(ana)

        assert validate_draft(draft) == draft

    def test_values_are_not_trimmed(self, ana: dict[str, str]) -> None:
        ana["matricula"] = " A1 "

        assert validate_draft(ana).matricula == " A1 "

    @pytest.mark.parametrize("nome", ["Al", "", "x" * 101])
    def test_nome_length(self, ana: dict[str, str], nome: str) -> None:
        ana["nome"] = nome

        with pytest.raises(ValidationError) as exc_info:
            validate_draft(ana)

        assert set(exc_info.value.errors) == {"nome"}

    def test_nome_boundaries(self, ana: dict[str, str]) -> None:
        for nome in ("Ana", "x" * 100):
            assert validate_draft({**ana, "nome": nome}).nome == nome

    @pytest.mark.parametrize("matricula", ["", "9" * 51])
    def test_matricula_length(self, ana: dict[str, str], matricula: str) -> None:
        ana["matricula"] = matricula

        with pytest.raises(ValidationError) as exc_info:
            validate_draft(ana)

        assert set(exc_info.value.errors) == {"matricula"}

    def test_matricula_max_length_ok(self, ana: dict[str, str]) -> None:
        assert validate_draft({**ana, "matricula": "9" * 50}).matricula == "9" * 50

    @pytest.mark.parametrize(
        "email", ["", "ana", "ana@", "ana@x", "@x.com", "ana@@x.com", "ana@x.com\n"]
    )
    def test_email_syntax(self, ana: dict[str, str], email: str) -> None:
        ana["email"] = email

        with pytest.raises(ValidationError) as exc_info:
            validate_draft(ana)

        assert set(exc_info.value.errors) == {"email"}

    def test_email_too_long(self, ana: dict[str, str]) -> None:
        ana["email"] = "a" * 250 + "@x.com"

        with pytest.raises(ValidationError) as exc_info:
            validate_draft(ana)

        assert "email" in exc_info.value.errors

    def test_empty_birth_date(self, ana: dict[str, str]) -> None:
        ana["dataNascimento"] = ""

        with pytest.raises(ValidationError) as exc_info:
            validate_draft(ana)

        assert set(exc_info.value.errors) == {"dataNascimento"}

    def test_missing_fields_reported(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_draft({"nome": "Ana Silva"})

        errors = exc_info.value.errors
        assert set(errors) == {"matricula", "email", "dataNascimento"}
        assert errors["email"] == "This field is required"

    def test_reports_every_failing_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_draft({"nome": "Al", "matricula": "", "email": "bad", "dataNascimento": ""})

        assert set(exc_info.value.errors) == {"nome", "matricula", "email", "dataNascimento"}

    def test_non_string_value(self, ana: dict[str, object]) -> None:
        ana["matricula"] = 123

        with pytest.raises(ValidationError) as exc_info:
            validate_draft(ana)

        assert "matricula" in exc_info.value.errors

    def test_error_message_names_fields(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_draft({"nome": "Al", "matricula": "1", "email": "a@b.co", "dataNascimento": "x"})

        assert "nome" in str(exc_info.value)


@pytest.mark.unit
class TestEmailSyntax:
    """Tests for is_valid_email."""

    @pytest.mark.parametrize(
        "email",
        ["ana@x.com", "Ana.Silva@Escola.EDU.br", "o'neil+tag@sub-domain.example.io"],
    )
    def test_valid(self, email: str) -> None:
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        [
            ".ana@x.com",
            "ana..silva@x.com",
            "ana.@x.com",
            "ana@-x.com",
            "ana@x.c",
            "ana x@y.com",
            "ana@x.com\n",
        ],
    )
    def test_invalid(self, email: str) -> None:
        assert not is_valid_email(email)


@pytest.mark.unit
def test_student_draft_is_frozen(ana: dict[str, str]) -> None:
    draft = StudentDraft.model_validate(ana)

    with pytest.raises(pydantic.ValidationError):
        draft.nome = "Other Name"  # type: ignore[misc]

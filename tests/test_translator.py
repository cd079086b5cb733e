"""Message provider stories: templates, substitution and rejected input."""

from __future__ import annotations

import pytest

from gullfoss.domain import (
    GREETING_TEMPLATES,
    InvalidArgumentError,
    Language,
    MessageProvider,
    UnknownLanguageError,
    greeting_template,
)


@pytest.fixture
def provider() -> MessageProvider:
    return MessageProvider()


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("language", "expected"),
    [
        (Language.ENGLISH, "Hello John !"),
        (Language.FRENCH, "Bonjour John !"),
    ],
)
def test_say_hello_to_translates_in_provided_language(
    provider: MessageProvider, language: Language, expected: str
) -> None:
    """sayHelloTo shall translate in the provided language."""
    assert provider.say_hello_to("John", language) == expected


@pytest.mark.os_agnostic
def test_empty_name_yields_double_space(provider: MessageProvider) -> None:
    """An empty name is substituted like any other string."""
    assert provider.say_hello_to("", Language.FRENCH) == "Bonjour  !"


@pytest.mark.os_agnostic
def test_percent_signs_in_names_are_not_interpreted(provider: MessageProvider) -> None:
    """Format directives inside the name are copied literally."""
    assert provider.say_hello_to("100%s %d", Language.ENGLISH) == "Hello 100%s %d !"


@pytest.mark.os_agnostic
def test_every_language_has_exactly_one_template() -> None:
    """The template table covers the whole enumeration and nothing else."""
    assert set(GREETING_TEMPLATES) == set(Language)
    for template in GREETING_TEMPLATES.values():
        assert template.count("%s") == 1


@pytest.mark.os_agnostic
@pytest.mark.parametrize("language", list(Language))
def test_every_language_greets_without_error(provider: MessageProvider, language: Language) -> None:
    """Each enumerated language renders a greeting ending in ' !'."""
    assert provider.say_hello_to("Jane", language).endswith("Jane !")


@pytest.mark.os_agnostic
def test_template_table_is_read_only() -> None:
    """Templates cannot be swapped at runtime."""
    with pytest.raises(TypeError):
        GREETING_TEMPLATES[Language.ENGLISH] = "Hi %s"  # type: ignore[index]


@pytest.mark.os_agnostic
@pytest.mark.parametrize("language", ["french", "GERMAN", None, 0])
def test_unknown_language_is_rejected(provider: MessageProvider, language: object) -> None:
    """Anything other than a Language member raises UnknownLanguageError."""
    with pytest.raises(UnknownLanguageError, match="Unsupported language"):
        provider.say_hello_to("John", language)  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_unknown_language_error_is_an_invalid_argument() -> None:
    """UnknownLanguageError belongs to the InvalidArgument family."""
    with pytest.raises(InvalidArgumentError):
        greeting_template("klingon")  # type: ignore[arg-type]


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", [None, 42, b"John"])
def test_non_string_names_are_rejected(provider: MessageProvider, name: object) -> None:
    """Names must be strings."""
    with pytest.raises(InvalidArgumentError, match="person_name must be a string"):
        provider.say_hello_to(name, Language.ENGLISH)  # type: ignore[arg-type]

import msgspec


class LocaleText(msgspec.Struct, frozen=True):
    """A census string localized into each supported client language.

    Languages missing from a record decode as empty strings.
    """

    de: str = ""
    en: str = ""
    es: str = ""
    fr: str = ""
    it: str = ""
    tr: str = ""

    def __str__(self) -> str:
        return self.en

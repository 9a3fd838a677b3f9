"""Response models for the Readability Parser API."""
from datetime import datetime
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import DecodeError

# Format the parser uses for date_published, e.g. "2013-02-20 00:00:00"
PARSER_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ParserResponse(BaseModel):
    """
    Article extracted by the Readability Parser API.

    One instance is decoded from one successful response body. Instances are
    frozen; ownership passes to the caller.

    Multi-page articles:
        When the article spans several pages, ``content`` holds only the
        ``rendered_pages`` already rendered and ``next_page_id`` identifies
        the next page for a follow-up request. The client never follows it.

    Example:
        >>> response = ParserResponse.model_validate_json(body)
        >>> response.title
        'Embrace One Health'
        >>> response.has_more_pages
        False
    """

    domain: str
    author: str | None = None
    url: str
    short_url: str = Field(validation_alias=AliasChoices("short_url", "shortURL"))
    title: str
    total_pages: int = Field(validation_alias=AliasChoices("total_pages", "totalPages"))
    word_count: int = Field(validation_alias=AliasChoices("word_count", "wordCount"))
    content: str
    date_published: datetime | None = Field(
        default=None, validation_alias=AliasChoices("date_published", "datePublished")
    )
    next_page_id: str | None = Field(
        default=None, validation_alias=AliasChoices("next_page_id", "nextPageId")
    )
    rendered_pages: int = Field(
        validation_alias=AliasChoices("rendered_pages", "renderedPages")
    )

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("date_published", mode="before")
    @classmethod
    def parse_date_published(cls, v: object) -> object:
        """Accept the parser's "YYYY-MM-DD HH:MM:SS" format; empty means unknown."""
        if v is None:
            return None
        if isinstance(v, str):
            stripped = v.strip()
            if not stripped:
                return None
            try:
                return datetime.strptime(stripped, PARSER_DATE_FORMAT)
            except ValueError:
                # Leave ISO 8601 and anything else to pydantic
                return stripped
        return v

    @property
    def has_more_pages(self) -> bool:
        """True when the parser reported a next page to request."""
        return self.next_page_id is not None


def parse_response(url: str, body: bytes | str) -> ParserResponse:
    """
    Decode a parser response body.

    Args:
        url: Page URL the response belongs to (for error context)
        body: Raw JSON body

    Returns:
        Decoded ParserResponse

    Raises:
        DecodeError: If the body is not valid JSON or does not match the model
    """
    try:
        return ParserResponse.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(url, summarize_validation_error(e)) from e


def summarize_validation_error(error: ValidationError) -> str:
    """
    One-line summary of a validation error, without input echoes or help URLs.

    Example:
        "title: Field required; word_count: Input should be a valid integer"
    """
    parts = []
    for detail in error.errors(include_url=False, include_input=False):
        location = ".".join(str(part) for part in detail["loc"]) or "body"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)

"""
Pydantic request models for the job, jobs and quote endpoints.

The models are optional: every resource method also accepts a plain
dictionary (or a scalar id).  Field names follow the underscore convention
of the API; unknown fields are passed through untouched so new API options
can be used without a library update.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

JobId = Union[int, str]


class _PayloadModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class JobRef(_PayloadModel):
    """Reference to a single job (or order / glossary) by its ``id``."""

    id: JobId


class RevisionRef(JobRef):
    """
    Reference to one revision of a job.

    Attributes
    ----------
    rev_id : int | str
        Revision identifier; ``revId`` is accepted as an alias.
    """

    rev_id: JobId = Field(alias="revId")


class JobComment(JobRef):
    """Comment posted to the job's thread."""

    body: str


class JobUpdate(JobRef):
    """
    Payload of ``PUT translate/job/{id}``.

    Attributes
    ----------
    action : str
        One of ``revise``, ``approve``, ``reject`` or ``archive``.
    comment : Optional[str]
        Comment for the translator (``revise``) or Gengo (``reject``).
    rating : Optional[int]
        Translation rating 1-5 (``approve``).
    """

    action: str
    comment: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    for_translator: Optional[str] = None
    for_mygengo: Optional[str] = None
    public: Optional[int] = None
    reason: Optional[str] = None
    follow_up: Optional[str] = None


class JobsQuery(_PayloadModel):
    """Filters of ``GET translate/jobs``."""

    status: Optional[str] = None
    timestamp_after: Optional[int] = None
    count: Optional[int] = Field(default=None, gt=0)


class JobsCreate(_PayloadModel):
    """
    Payload of ``POST translate/jobs`` and ``POST translate/service/quote``.

    Attributes
    ----------
    jobs : Dict[str, Dict[str, Any]]
        Mapping of client-side job keys to job definitions (``body_src``,
        ``lc_src``, ``lc_tgt``, ``tier`` ...).
    as_group : Optional[int]
        ``1`` to have the jobs translated by the same translator.
    """

    jobs: Dict[str, Dict[str, Any]]
    as_group: Optional[int] = None
    comment: Optional[str] = None

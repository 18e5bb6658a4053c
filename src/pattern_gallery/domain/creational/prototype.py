"""Prototype pattern - new job posts are cloned from existing ones."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class JobPostStatus(str, Enum):
    """Publication status of a job post."""
    NEW = "New"
    DRAFT = "Draft"


class JobPost(BaseModel):
    """Job post that can serve as a prototype for new posts."""
    model_config = ConfigDict(validate_assignment=True)

    title: str
    status: JobPostStatus = JobPostStatus.NEW

    def clone(self) -> "JobPost":
        """
        Create a draft copy of this post.

        The copy is titled ``Copy of (<title>)`` and starts as a draft; the
        prototype itself is left unchanged.
        """
        return self.model_copy(
            update={"title": f"Copy of ({self.title})", "status": JobPostStatus.DRAFT}
        )

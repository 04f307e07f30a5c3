"""
Contact form procedures.

Public visitors create submissions; staff list them and mark them read.
"""
from typing import List

from sqlalchemy.orm import Session

from sitecms.db import schemas
from sitecms.db.repositories import ContactSubmissionRepository
from sitecms.api.procedures import ProcedureRouter

router = ProcedureRouter()


@router.mutation(
    "createContactSubmission",
    input=schemas.ContactSubmissionCreate,
    output=schemas.ContactSubmission,
)
def create_contact_submission(db: Session, submission: schemas.ContactSubmissionCreate):
    return ContactSubmissionRepository(db).create(submission)


@router.query("getContactSubmissions", output=List[schemas.ContactSubmission])
def get_contact_submissions(db: Session):
    return ContactSubmissionRepository(db).list()


@router.query("getUnreadContactSubmissions", output=List[schemas.ContactSubmission])
def get_unread_contact_submissions(db: Session):
    return ContactSubmissionRepository(db).list_unread()


@router.mutation(
    "markContactSubmissionAsRead",
    input=schemas.ContactSubmissionId,
    output=schemas.ContactSubmission,
)
def mark_contact_submission_as_read(db: Session, target: schemas.ContactSubmissionId):
    return ContactSubmissionRepository(db).mark_read(target.id)

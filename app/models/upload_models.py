"""
app/models/upload_models.py

Pydantic DTOs for the upload flow.
The request has no DTO — the controller reads the multipart form
directly; only the response shape is defined here.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UploadResponse(BaseModel):
    """
    Successful response for POST /upload/.

        {
            "filePath": "uploads/1718000000000-resume.pdf",
            "fileType": "application/pdf"
        }
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    file_path: str
    file_type: str

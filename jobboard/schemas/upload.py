# jobboard/schemas/upload.py

from pydantic import BaseModel


# Response for POST /api/upload
class UploadResponse(BaseModel):
    url: str # e.g. /uploads/<generated-name>
    filename: str # the client's original filename

# Importing the modules registers the document sources by name
from . import http_documents, local_documents  # noqa: F401

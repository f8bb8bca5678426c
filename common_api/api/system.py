"""
System API - Information about the server.
"""

from ..loading import LoadingKind
from ..models import Software
from ..serialization import ASSIGN_OPTIONS
from ._resource import BaseAPI
from .impl._support import check_show_loading, loading


class SystemAPI(BaseAPI):
    entity_class = Software

    def get_info(self, show_loading=True):
        """Get the name, version and build of the server software."""
        check_show_loading(show_loading)
        with loading(self, show_loading, LoadingKind.GETTING):
            obj = self.http.get("/system/info")
        result = Software.create(obj, ASSIGN_OPTIONS)
        self.logger.info("Successfully get the system information.")
        self.logger.debug("The system information is: %s", result)
        return result

    def get_time(self):
        """Get the current time of the server as an ISO-8601 string."""
        timestamp = self.http.get("/system/time")
        self.logger.info("The current time of the server is: %s", timestamp)
        return timestamp

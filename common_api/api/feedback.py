"""
Feedback API - Feedback submitted by users and its processing tracks.
"""

from ..loading import LoadingKind
from ..models import Feedback, FeedbackAction, FeedbackState, FeedbackTrack
from ..serialization import ASSIGN_OPTIONS, TO_JSON_OPTIONS, to_json
from ..validation import ID_TYPES, check_argument_type, check_id_argument_type
from ._resource import AUDIT_CRITERIA, BaseAPI, fields, id_code_name
from .impl import add_impl, get_impl, list_impl
from .impl._support import check_show_loading, expand, loading, query


class FeedbackAPI(BaseAPI):
    """
    Feedback is never updated directly. It moves through its states by
    actions, and each action appends a ``FeedbackTrack``.
    """

    path = "/feedback"
    entity_class = Feedback
    criteria = (
        fields(
            category=str,
            status=(FeedbackState, str),
            submitter_id=ID_TYPES,
            submitter_username=str,
            type=str,
            deleted=bool,
        )
        + id_code_name("app")
        + AUDIT_CRITERIA
    )

    def list(self, page_request=None, criteria=None, sort_request=None, transform_urls=True, show_loading=True):
        return list_impl(self, self.path, page_request, criteria, sort_request, show_loading,
                         {"transform_urls": transform_urls})

    def get(self, id, transform_urls=True, show_loading=True):
        return get_impl(self, "/feedback/{id}", id, show_loading, {"transform_urls": transform_urls})

    def get_tracks(self, id, transform_urls=True, show_loading=True):
        """
        Get the processing history of a feedback.

        Returns:
            List of ``FeedbackTrack``, oldest first
        """
        check_id_argument_type("id", id)
        check_argument_type("transform_urls", transform_urls, bool)
        check_show_loading(show_loading)
        with loading(self, show_loading, LoadingKind.GETTING):
            obj = self.http.get(expand("/feedback/{id}/track", id=id),
                                params=query({"transform_urls": transform_urls}))
        result = FeedbackTrack.create_array(obj, ASSIGN_OPTIONS)
        self.logger.info('Successfully get all tracks of the Feedback by its ID "%s".', id)
        self.logger.debug("The FeedbackTracks are: %s", result)
        return result

    def add(self, entity, show_loading=True):
        return add_impl(self, self.path, entity, show_loading)

    def perform_action(self, id, action, track, show_loading=True):
        """
        Perform an action on a feedback.

        Args:
            id: ID of the feedback
            action: A ``FeedbackAction`` or its name
            track: ``FeedbackTrack`` describing the action

        Returns:
            The ``FeedbackTrack`` stored by the server
        """
        check_id_argument_type("id", id)
        check_argument_type("action", action, (FeedbackAction, str))
        check_argument_type("track", track, (FeedbackTrack, dict))
        check_show_loading(show_loading)
        action_name = action.value if isinstance(action, FeedbackAction) else action
        data = to_json(track, TO_JSON_OPTIONS)
        url = expand("/feedback/{id}/action/{action}", id=id, action=action_name)
        with loading(self, show_loading, LoadingKind.UPDATING):
            obj = self.http.put(url, data)
        result = FeedbackTrack.create(obj, ASSIGN_OPTIONS)
        self.logger.info('Successfully perform the action %s on the Feedback "%s".', action_name, id)
        self.logger.debug("The added FeedbackTrack is: %s", result)
        return result

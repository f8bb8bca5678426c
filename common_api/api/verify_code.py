"""
Verification code API - Sends one-time codes by SMS or email.
"""

from ..loading import LoadingKind
from ..models import User, VerifyScene
from ..validation import check_argument_type
from ._resource import BaseAPI
from .impl._support import loading


def _scene_name(scene) -> str:
    return scene.value if isinstance(scene, VerifyScene) else scene


class VerifyCodeAPI(BaseAPI):
    """The codes are posted form-encoded, and the indicator is always shown."""

    entity_class = User

    def send_by_sms(self, mobile, scene):
        check_argument_type("mobile", mobile, str)
        check_argument_type("scene", scene, (VerifyScene, str))
        self.logger.info("Sending verification code to the mobile: %s", mobile)
        with loading(self, True, LoadingKind.SUBMITTING, "Sending the verification code..."):
            self.http.post("/verify-code/sms", data={"mobile": mobile, "scene": _scene_name(scene)})
        self.logger.info("Successfully send the verification code to the mobile: %s", mobile)

    def send_by_email(self, email, scene):
        check_argument_type("email", email, str)
        check_argument_type("scene", scene, (VerifyScene, str))
        self.logger.info("Sending verification code to the email: %s", email)
        with loading(self, True, LoadingKind.SUBMITTING, "Sending the verification code..."):
            self.http.post("/verify-code/email", data={"email": email, "scene": _scene_name(scene)})
        self.logger.info("Successfully send the verification code to the email: %s", email)

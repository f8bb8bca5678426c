"""
Enumerations shared by the models and the API methods.

Members are ``str`` enums so they serialize to their names on the wire and
compare equal to plain strings.
"""

import enum


class State(str, enum.Enum):
    NORMAL = "NORMAL"
    DISABLED = "DISABLED"
    LOCKED = "LOCKED"
    FROZEN = "FROZEN"
    BLOCKED = "BLOCKED"


class Gender(str, enum.Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    UNKNOWN = "UNKNOWN"


class CredentialType(str, enum.Enum):
    IDENTITY_CARD = "IDENTITY_CARD"
    PASSPORT = "PASSPORT"
    OFFICER_CARD = "OFFICER_CARD"
    DRIVER_LICENSE = "DRIVER_LICENSE"
    HOUSEHOLD_REGISTER = "HOUSEHOLD_REGISTER"
    BUSINESS_LICENSE = "BUSINESS_LICENSE"
    OTHER = "OTHER"


class SortOrder(str, enum.Enum):
    ASC = "ASC"
    DESC = "DESC"


class Platform(str, enum.Enum):
    WEB = "WEB"
    ANDROID = "ANDROID"
    IOS = "IOS"
    WINDOWS = "WINDOWS"
    MACOS = "MACOS"
    LINUX = "LINUX"
    OTHER = "OTHER"


class SocialNetwork(str, enum.Enum):
    WECHAT = "WECHAT"
    QQ = "QQ"
    WEIBO = "WEIBO"
    ALIPAY = "ALIPAY"
    DINGTALK = "DINGTALK"
    GITHUB = "GITHUB"


class VerifyScene(str, enum.Enum):
    """What a verification code is sent for."""

    REGISTER = "REGISTER"
    LOGIN = "LOGIN"
    RESET_PASSWORD = "RESET_PASSWORD"
    CHANGE_MOBILE = "CHANGE_MOBILE"
    CHANGE_EMAIL = "CHANGE_EMAIL"
    BIND_MOBILE = "BIND_MOBILE"
    BIND_EMAIL = "BIND_EMAIL"


class AttachmentType(str, enum.Enum):
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    AUDIO = "AUDIO"
    DOCUMENT = "DOCUMENT"
    ARCHIVE = "ARCHIVE"
    OTHER = "OTHER"


class FeedbackState(str, enum.Enum):
    SUBMITTED = "SUBMITTED"
    PROCESSING = "PROCESSING"
    RESOLVED = "RESOLVED"
    REJECTED = "REJECTED"
    CLOSED = "CLOSED"


class FeedbackAction(str, enum.Enum):
    ACCEPT = "ACCEPT"
    REPLY = "REPLY"
    RESOLVE = "RESOLVE"
    REJECT = "REJECT"
    CLOSE = "CLOSE"
    REOPEN = "REOPEN"


class DeviceStatus(str, enum.Enum):
    ONLINE = "ONLINE"
    OFFLINE = "OFFLINE"
    UNKNOWN = "UNKNOWN"

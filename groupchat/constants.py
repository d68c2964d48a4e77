"""Global constants for the groupchat application."""

# Collection names
USERS_COLLECTION = "users"
GROUPS_COLLECTION = "groups"

# Fields on 'groups' documents
GROUP_MEMBERS = "members"
GROUP_CHANNEL_ID = "streamChannelId"
CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"

# Fields on 'users' documents
USER_FULL_NAME = "fullName"
USER_PROFILE_PIC = "profilePic"
USER_NATIVE_LANGUAGE = "nativeLanguage"
USER_LEARNING_LANGUAGE = "learningLanguage"

# Placeholder group pictures
GROUP_PICTURE_URL_TEMPLATE = "https://avatar.iran.liara.run/public/group/{number}.png"
GROUP_PICTURE_POOL_SIZE = 50

# Channel ids
CHANNEL_ID_PREFIX = "group"
CHANNEL_ID_SUFFIX_LENGTH = 9
CHANNEL_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
CHANNEL_ID_MAX_ATTEMPTS = 5

# Session keys
SESSION_USER_ID = "user_id"

"""Descriptions of RPC error names starting with a digit or A to M.

Entries whose names end in, or contain, ``X`` describe errors that carry
extra data. Their text holds a single ``{}`` placeholder for that value.
"""

from __future__ import annotations

# One entry per line as ``NAME | description``; an indented line continues
# the description of the entry above it.
_TABLE = """
ABOUT_TOO_LONG | About string too long
ACCESS_TOKEN_EXPIRED | Bot token expired
ACCESS_TOKEN_INVALID | The provided token is not valid
ACTIVE_USER_REQUIRED | The method is only available
    to already activated users
ADMINS_TOO_MUCH | Too many admins
ADMIN_RANK_EMOJI_NOT_ALLOWED | Emoji are not allowed
    in admin titles or ranks
ADMIN_RANK_INVALID | The given admin title or rank was invalid
    (possibly larger than 16 characters)
API_ID_INVALID | API ID invalid
API_ID_PUBLISHED_FLOOD | This API id was published somewhere,
    you can't use it now
ARTICLE_TITLE_EMPTY | The title of the article is empty
AUTH_BYTES_INVALID | The provided authorization is invalid
AUTH_KEY_DUPLICATED | The authorization key (session file) was used
    under two different IP addresses simultaneously, and can no longer
    be used. Use the same session exclusively, or use different sessions
AUTH_KEY_INVALID | Auth key invalid
AUTH_KEY_PERM_EMPTY | The method is unavailable for temporary
    authorization key, not bound to permanent
AUTH_KEY_UNREGISTERED | The key is not registered in the system
AUTH_RESTART | Restart the authorization process
AUTH_TOKEN_ALREADY_ACCEPTED | The authorization token was already used
AUTH_TOKEN_EXPIRED | The authorization token has expired
AUTH_TOKEN_INVALID | An invalid authorization token was provided
AUTH_TOKEN_INVALIDX | The specified auth token is invalid
BANNED_RIGHTS_INVALID | You provided some invalid flags
    in the banned rights
BOT_CHANNELS_NA | Bots can't edit admin privileges
BOT_COMMAND_DESCRIPTION_INVALID | The command description was empty,
    too long or had invalid characters used
BOT_DOMAIN_INVALID | Bot domain invalid
BOT_GROUPS_BLOCKED | This bot can't be added to groups
BOT_INLINE_DISABLED | This bot can't be used in inline mode
BOT_INVALID | This is not a valid bot
BOT_METHOD_INVALID | The API access for bot users is restricted.
    The method you tried to invoke cannot be executed as a bot
BOT_MISSING | This method can only be run by a bot
BOT_PAYMENTS_DISABLED | This method can only be run by a bot
BOT_POLLS_DISABLED | You cannot create polls under a bot account
BOT_RESPONSE_TIMEOUT | The bot did not answer
    to the callback query in time
BOTS_TOO_MUCH | There are too many bots in this chat/channel
BROADCAST_FORBIDDEN | The request cannot be used
    in broadcast channels
BROADCAST_ID_INVALID | The channel is invalid
BROADCAST_PUBLIC_VOTERS_FORBIDDEN | You can't forward polls
    with public voters
BROADCAST_REQUIRED | The request can only be used
    with a broadcast channel
BUTTON_DATA_INVALID | The data of one or more of the buttons
    you provided is invalid
BUTTON_TYPE_INVALID | The type of one of the buttons
    you provided is invalid
BUTTON_URL_INVALID | Button URL invalid
CALL_ALREADY_ACCEPTED | The call was already accepted
CALL_ALREADY_DECLINED | The call was already declined
CALL_OCCUPY_FAILED | The call failed because the user
    is already making another call
CALL_PEER_INVALID | The provided call peer object is invalid
CALL_PROTOCOL_FLAGS_INVALID | Call protocol flags invalid
CDN_METHOD_INVALID | You can't call this method in a CDN DC
CHANNEL_INVALID | The provided channel is invalid
CHANNEL_PRIVATE | The channel specified is private and you lack
    permission to access it. Another reason may be that you were
    banned from it
CHANNEL_PUBLIC_GROUP_NA | channel/supergroup not available
CHANNEL_TOO_LARGE | Channel is too large to be deleted; this error
    is issued when trying to delete channels with more than
    1000 members (subject to change)
CHANNELS_ADMIN_LOCATED_TOO_MUCH | Returned if both the check_limit
    and the by_location flags are set and the user has reached
    the limit of public geogroups
CHANNELS_ADMIN_PUBLIC_TOO_MUCH | You're admin of too many public
    channels, make some channels private to change the username
    of this channel
CHANNELS_TOO_MUCH | You have joined too many channels/supergroups
CHAT_ABOUT_NOT_MODIFIED | About text has not changed
CHAT_ABOUT_TOO_LONG | Chat about too long
CHAT_ADMIN_INVITE_REQUIRED | You do not have the rights to do this
CHAT_ADMIN_REQUIRED | You must be an admin in this chat to do this
CHAT_FORBIDDEN | You cannot write in this chat
CHAT_ID_EMPTY | The provided chat ID is empty
CHAT_ID_INVALID | The provided chat id is invalid
CHAT_INVALID | Invalid chat
CHAT_LINK_EXISTS | The chat is linked to a channel
    and cannot be used in that request
CHAT_NOT_MODIFIED | The pinned message wasn't modified
CHAT_RESTRICTED | You can't send messages in this chat,
    you were restricted
CHAT_SEND_GIFS_FORBIDDEN | You can't send gifs in this chat
CHAT_SEND_INLINE_FORBIDDEN | You cannot send inline results
    in this chat
CHAT_SEND_MEDIA_FORBIDDEN | You can't send media in this chat
CHAT_SEND_POLL_FORBIDDEN | You can't send polls in this chat
CHAT_SEND_STICKERS_FORBIDDEN | You can't send stickers in this chat
CHAT_TITLE_EMPTY | No chat title provided
CHAT_WRITE_FORBIDDEN | You can't write in this chat
CODE_EMPTY | The provided code is empty
CODE_HASH_INVALID | Code hash invalid
CODE_INVALID | Code invalid
CONNECTION_API_ID_INVALID | The provided API id is invalid
CONNECTION_APP_VERSION_EMPTY | App version is empty
CONNECTION_DEVICE_MODEL_EMPTY | Device model empty
CONNECTION_LANG_PACK_INVALID | Language pack invalid
CONNECTION_LAYER_INVALID | The very first request must always be
    InvokeWithLayerRequest
CONNECTION_NOT_INITED | Connection not initialized
CONNECTION_SYSTEM_EMPTY | Connection system empty
CONNECTION_SYSTEM_LANG_CODE_EMPTY | The system language string
    was empty during connection
CONTACT_ADD_MISSING | Contact to add is missing
CONTACT_ID_INVALID | The provided contact ID is invalid
CONTACT_NAME_EMPTY | The provided contact name cannot be empty
CONTACT_REQ_MISSING | Missing contact request
DATA_INVALID | Encrypted data invalid
DATA_JSON_INVALID | The provided JSON data is invalid
DATA_TOO_LONG | Data too long
DATE_EMPTY | Date empty
DC_ID_INVALID | The provided DC ID is invalid
DH_G_A_INVALID | g_a invalid
EMAIL_HASH_EXPIRED | The email hash expired and cannot be used
    to verify it
EMAIL_INVALID | The given email is invalid
EMAIL_UNCONFIRMED | Email unconfirmed
EMAIL_VERIFY_EXPIRED | The verification email has expired
EMOTICON_EMPTY | The emoticon field cannot be empty
EMOTICON_INVALID | The specified emoticon cannot be used
    or was not a emoticon
ENCRYPTED_MESSAGE_INVALID | Encrypted message invalid
ENCRYPTION_ALREADY_ACCEPTED | Secret chat already accepted
ENCRYPTION_ALREADY_DECLINED | The secret chat was already declined
ENCRYPTION_DECLINED | The secret chat was declined
ENCRYPTION_ID_INVALID | The provided secret chat ID is invalid
ENCRYPTION_OCCUPY_FAILED | TDLib developer claimed it is not an error
    while accepting secret chats and 500 is used instead of 420
ENTITIES_TOO_LONG | It is no longer possible to send such long data
    inside entity tags (for example inline text URLs)
ENTITY_MENTION_USER_INVALID | You mentioned an invalid user
ERROR_TEXT_EMPTY | The provided error message is empty
EXPORT_CARD_INVALID | Provided card is invalid
EXTERNAL_URL_INVALID | External URL invalid
FIELD_NAME_EMPTY | The field with the name FIELD_NAME is missing
FIELD_NAME_INVALID | The field with the name FIELD_NAME is invalid
FILE_ID_INVALID | The provided file id is invalid
FILE_PART_0_MISSING | File part 0 missing
FILE_PART_EMPTY | The provided file part is empty
FILE_PART_INVALID | The file part number is invalid
FILE_PART_LENGTH_INVALID | The length of a file part is invalid
FILE_PART_SIZE_CHANGED | The file part size (chunk size)
    cannot change during upload
FILE_PART_SIZE_INVALID | The provided file part size is invalid
FILE_PART_TOO_BIG | The uploaded file part is too big
FILE_PARTS_INVALID | The number of file parts is invalid
FILE_REFERENCE_EMPTY | The file reference must exist to access
    the media and it cannot be empty
FILE_REFERENCE_EXPIRED | File reference expired, it must be refetched
FILEREF_UPGRADE_NEEDED | The file reference needs to be refreshed
    before being used again
FILTER_ID_INVALID | The specified filter ID is invalid
FIRSTNAME_INVALID | The first name is invalid
FOLDER_ID_EMPTY | The folder you tried to delete was already empty
FOLDER_ID_INVALID | The folder you tried to use was not valid
FRESH_CHANGE_ADMINS_FORBIDDEN | You were just elected admin,
    you can't add or modify other admins yet
FRESH_CHANGE_PHONE_FORBIDDEN | Recently logged-in users
    cannot use this request
FRESH_RESET_AUTHORISATION_FORBIDDEN | You can't logout other sessions
    if less than 24 hours have passed since you logged on
    the current session
FROM_MESSAGE_BOT_DISABLED | Bots can't use fromMessage
    min constructors
GAME_BOT_INVALID | You cannot send that game with the current bot
GEO_POINT_INVALID | Invalid geoposition provided
GIF_CONTENT_TYPE_INVALID | GIF content-type invalid
GIF_ID_INVALID | The provided GIF ID is invalid
GRAPH_INVALID_RELOAD | Invalid graph token provided, please reload
    the stats and provide the updated token
GRAPH_OUTDATED_RELOAD | The graph is outdated, please get a new
    async token using stats.getBroadcastStats
GROUPED_MEDIA_INVALID | Invalid grouped media
HASH_INVALID | The provided hash is invalid
HISTORY_GET_FAILED | Fetching of history failed
IMAGE_PROCESS_FAILED | Failure while processing image
INLINE_BOT_REQUIRED | The action must be performed through
    an inline bot callback
INLINE_RESULT_EXPIRED | The inline query expired
INPUT_CONSTRUCTOR_INVALID | The provided constructor is invalid
INPUT_FETCH_ERROR | An error occurred while deserializing
    TL parameters
INPUT_FETCH_FAIL | Failed deserializing TL payload
INPUT_LAYER_INVALID | The provided layer is invalid
INPUT_METHOD_INVALID | The invoked method does not exist anymore
    or has never existed
INPUT_REQUEST_TOO_LONG | The request is too big
INPUT_USER_DEACTIVATED | The specified user was deleted
INVITE_HASH_EMPTY | The invite hash is empty
INVITE_HASH_EXPIRED | The invite link has expired
INVITE_HASH_INVALID | The invite hash is invalid
LANG_PACK_INVALID | The provided language pack is invalid
LASTNAME_INVALID | The last name is invalid
LIMIT_INVALID | The provided limit is invalid
LINK_NOT_MODIFIED | Discussion link not modified
LOCATION_INVALID | The provided location is invalid
MAX_ID_INVALID | The provided max ID is invalid
MAX_QTS_INVALID | The provided QTS were invalid
MD5_CHECKSUM_INVALID | The MD5 checksums do not match
MEDIA_CAPTION_TOO_LONG | The caption is too long
MEDIA_EMPTY | The provided media object is invalid
MEDIA_INVALID | Media invalid
MEDIA_NEW_INVALID | The new media to edit the message with
    is invalid (such as stickers or voice notes)
MEDIA_PREV_INVALID | The old media cannot be edited with anything
    else (such as stickers or voice notes)
MEGAGROUP_ID_INVALID | Invalid supergroup ID
MEGAGROUP_PREHISTORY_HIDDEN | You can't set this discussion group
    because it's history is hidden
MEGAGROUP_REQUIRED | You can only use this method on a supergroup
MEMBER_NO_LOCATION | An internal failure occurred while fetching
    user info (couldn't find location)
MEMBER_OCCUPY_PRIMARY_LOC_FAILED | Occupation of primary member
    location failed
MESSAGE_AUTHOR_REQUIRED | Message author required
MESSAGE_DELETE_FORBIDDEN | You can't delete one of the messages
    you tried to delete, most likely because it is a service message.
MESSAGE_EDIT_TIME_EXPIRED | You can't edit this message anymore,
    too much time has passed since its creation.
MESSAGE_EMPTY | Empty or invalid UTF-8 message was sent
MESSAGE_IDS_EMPTY | No message ids were provided
MESSAGE_ID_INVALID | The provided message id is invalid
MESSAGE_NOT_MODIFIED | Content of the message was not modified
MESSAGE_POLL_CLOSED | The poll was closed and can no longer
    be voted on
MESSAGE_TOO_LONG | Message was too long. Current maximum length
    is 4096 UTF-8 characters
METHOD_INVALID | The API method is invalid and cannot be used
MSGID_DECREASE_RETRY | The request should be retried
    with a lower message ID
MSG_ID_INVALID | The message ID used in the peer was invalid
MSG_WAIT_FAILED | A waiting call returned an error
MT_SEND_QUEUE_TOO_LONG | <DOESN'T HAVE ANY INFO ABOUT ERROR
    MT_SEND_QUEUE_TOO_LONG>
MULTI_MEDIA_TOO_LONG | Too many media files for album
2FA_CONFIRM_WAIT_X | You'll be able to reset your account
    in X seconds. If not, account will be deleted in 1 week
    for security reasons
EMAIL_UNCONFIRMED_X | Email unconfirmed, the length of the code
    must be {}
FILE_MIGRATE_X | The file to be accessed is currently stored in DC {}
FILE_PART_X_MISSING | Part {} of the file is missing from storage
FLOOD_TEST_PHONE_WAIT_X | A wait of {} seconds is required
    in the test servers
FLOOD_WAIT_X | A wait of {} seconds is required
INTERDC_X_CALL_ERROR | An error occurred while communicating
    with DC {}
INTERDC_X_CALL_RICH_ERROR | A rich error occurred while
    communicating with DC {}
"""


def _parse_table(table: str) -> dict[str, str]:
    entries: dict[str, list[str]] = {}
    current: list[str] | None = None
    for line in table.splitlines():
        if not line.strip():
            continue
        if line[0].isspace():
            if current is None:
                raise ValueError(f"continuation without an entry: {line!r}")
            current.append(line.strip())
            continue
        name, _, text = line.partition(" | ")
        current = [text.strip()]
        entries[name.strip()] = current
    return {name: " ".join(parts) for name, parts in entries.items()}


MESSAGES: dict[str, str] = _parse_table(_TABLE)
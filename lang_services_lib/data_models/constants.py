class HttpMediaType:
    APPLICATION_JSON = "application/json"
    BINARY_FILE = "application/octet-stream"
    TEXT_PLAIN = "text/plain"
    AUDIO_OGG = "audio/ogg; codecs=opus"
    AUDIO_WAV = "audio/wav"
    AUDIO_FLAC = "audio/flac"


class HttpHeaders:
    ACCEPT = "Accept"
    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    USER_AGENT = "User-Agent"


# Language translation parameter names
BASE_MODEL_ID_PARAM = "base_model_id"
DEFAULT_PARAM = "default"
FORCED_GLOSSARY_PARAM = "forced_glossary"
MODEL_ID_PARAM = "model_id"
MONOLINGUAL_CORPUS_PARAM = "monolingual_corpus"
NAME_PARAM = "name"
PARALLEL_CORPUS_PARAM = "parallel_corpus"
SOURCE_PARAM = "source"
TARGET_PARAM = "target"
TEXT_PARAM = "text"

# Text to speech parameter names
VOICE_PARAM = "voice"
ACCEPT_PARAM = "accept"

# Envelope fields holding collections
LANGUAGES_FIELD = "languages"
MODELS_FIELD = "models"
VOICES_FIELD = "voices"

# Fields inspected (in order) for a server-provided error message
ERROR_MESSAGE_FIELDS = ["error", "message", "description", "error_message"]

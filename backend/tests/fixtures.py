"""Row factories shared by the endpoint tests."""

XSS_NAME = 'Naughty naughty very naughty <script>alert("xss");</script>'
XSS_NAME_SANITIZED = 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;'

XSS_CONTENT = (
    'Bad image <img src="https://url.to.file.which/does-not.exist" '
    'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
)
XSS_CONTENT_SANITIZED = (
    'Bad image <img src="https://url.to.file.which/does-not.exist">. '
    'But not <strong>all</strong> bad.'
)


def make_folders():
    return [
        {"id": 1, "folder_name": "Important"},
        {"id": 2, "folder_name": "Super"},
        {"id": 3, "folder_name": "Spangley"},
    ]


def make_notes():
    return [
        {"id": 1, "note_name": "Dogs", "content": "Corgis are the best.", "folder_id": 1},
        {"id": 2, "note_name": "Cats", "content": "Cats are fine too.", "folder_id": 2},
        {"id": 3, "note_name": "Pigs", "content": None, "folder_id": 3},
        {"id": 4, "note_name": "Birds", "content": "Tweet tweet.", "folder_id": 1},
    ]


def make_malicious_folder():
    return {"id": 911, "folder_name": XSS_NAME}


def make_malicious_note(folder_id=1):
    return {
        "id": 911,
        "note_name": XSS_NAME,
        "folder_id": folder_id,
        "content": XSS_CONTENT,
    }


def without_modified(note_body):
    """A note response body minus the store-assigned timestamp."""
    return {key: value for key, value in note_body.items() if key != "modified"}

class VideoNotFoundError(LookupError):
    def __init__(self, video_id):
        super().__init__(f"Video {video_id} not found")
        self.video_id = video_id


class InvalidTransitionError(Exception):
    """
    Raised when a like/unlike does not match the user's current state
    on the video (liking twice, or unliking without a prior like).
    """
    def __init__(self, video_id, username: str, action: str):
        if action == "like":
            message = f"User '{username}' has already liked video {video_id}"
        else:
            message = f"User '{username}' has not liked video {video_id}"
        super().__init__(message)
        self.video_id = video_id
        self.username = username
        self.action = action


class StoreError(Exception):
    """Underlying video store failed to read or write a record."""

class SnakeTail:
    """Ordered chain of tail segment handles.

    Index 0 is the segment right behind the head. Handles are entity hashes
    resolved through the world, the head itself is never part of the chain.
    """

    def __init__(self, segments: list[str] = None):
        self.segments: list[str] = list(segments) if segments else []

    def append(self, segment_hash: str):
        if segment_hash in self.segments:
            raise ValueError(f"Segment '{segment_hash}' is already part of the tail")
        self.segments.append(segment_hash)

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

"""Movie recording models."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Comment(BaseModel):
    """Free-form metadata attached to a movie."""

    model_config = ConfigDict(frozen=True)

    subject: str
    content: str


class Subtitle(BaseModel):
    """Text overlay shown from a given frame."""

    model_config = ConfigDict(frozen=True)

    frame: int = Field(ge=0)
    content: str


class Recording(BaseModel):
    """A movie ready to be written as FM2.

    The input body holds one record per frame: a command byte followed by
    one controller byte for every port set to 1, in port order.
    """

    model_config = ConfigDict(frozen=True)

    rom_file_name: str
    rom_checksum: str
    id: UUID = Field(default_factory=uuid4)

    version: int = 3
    emu_version: int = 22020
    rerecord_count: int = 0

    pal_flag: bool = False
    new_ppu: bool = False
    fds: bool = False
    fourscore: bool = False

    port0: int = Field(default=0, ge=0, le=1)
    port1: int = Field(default=0, ge=0, le=1)
    port2: int = Field(default=0, ge=0, le=1)

    binary: bool = True

    comments: tuple[Comment, ...] = ()
    subtitles: tuple[Subtitle, ...] = ()

    input: bytes = b""

    @property
    def ports(self) -> tuple[int, int, int]:
        """Return the three port flags in port order."""
        return (self.port0, self.port1, self.port2)

    @property
    def active_ports(self) -> list[int]:
        """Return the indices of ports carrying controller data."""
        return [index for index, port in enumerate(self.ports) if port == 1]

    @property
    def frame_record_size(self) -> int:
        """Return the size of one frame record: command byte plus controllers."""
        return 1 + len(self.active_ports)

    @property
    def frame_count(self) -> int:
        """Return the number of frames in the input body."""
        return len(self.input) // self.frame_record_size

    def comment(self, subject: str) -> str | None:
        """Return the content of the first comment with the given subject."""
        for comment in self.comments:
            if comment.subject == subject:
                return comment.content
        return None

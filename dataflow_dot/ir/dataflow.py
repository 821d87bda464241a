from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class DataflowModel(BaseModel):
    # Unknown keys in the document are dropped.
    model_config = ConfigDict(frozen=True, extra="ignore")


class DataArtifact(DataflowModel):
    """A piece of data, drawn as a box."""

    name: str
    source: str                    # application or service providing it
    description: Optional[str] = None


class Function(DataflowModel):
    """A process consuming and producing data, drawn as a filled ellipse."""

    name: str
    owner: str                     # grouping key for colour assignment
    inputs: Tuple[str, ...]
    outputs: Tuple[str, ...]


class DataflowGraph(DataflowModel):
    data: Tuple[DataArtifact, ...]
    functions: Tuple[Function, ...]

    def owners(self) -> List[str]:
        return [f.owner for f in self.functions]

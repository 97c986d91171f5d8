"""
Output handling for the video annotate tool.

Contains functions for serializing results to JSON.
"""

import os
import json
from typing import Any
from pydantic import BaseModel


def to_jsonable(data: Any) -> Any:
    """
    Convert Pydantic models (or lists of them) into JSON-compatible data.

    Args:
        data: A Pydantic model, a list of models, or plain data

    Returns:
        JSON-compatible data
    """
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, list) and all(isinstance(item, BaseModel) for item in data):
        return [item.model_dump(mode="json") for item in data]
    return data


def dumps(data: Any) -> str:
    return json.dumps(to_jsonable(data), indent=2, default=str)


def save_to_json(data: Any, filename: str, logger=None) -> None:
    """
    Save data to JSON file.

    Args:
        data: Data to save (can be a Pydantic model or dictionary)
        filename: Output filename
        logger: Logger instance
    """
    if logger:
        logger.info("Saving data to JSON", filename=filename)

    # Create directory if it doesn't exist
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, 'w', encoding='utf-8') as f:
        f.write(dumps(data))
        f.write("\n")

    if logger:
        logger.info("Data saved to JSON", filename=filename)

"""
Agent base class
Abstract base every engine wrapper derives from.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic
from loguru import logger

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """
    Agent base class

    Gives every engine the same entry point:
    - typed input and output
    - consistent validation and error logging
    """

    name: str = "BaseAgent"

    def __init__(self):
        self.logger = logger.bind(agent=self.name)

    def run(self, input_data: InputT) -> OutputT:
        """
        Runs the agent.

        Args:
            input_data: input data

        Returns:
            output data
        """
        try:
            self._validate_input(input_data)

            result = self._process(input_data)

            self._validate_output(result)

            return result

        except Exception as e:
            self.logger.error(f"{self.name} failed: {e}")
            raise

    @abstractmethod
    def _process(self, input_data: InputT) -> OutputT:
        """
        Actual processing (implemented by subclasses)
        """
        pass

    def _validate_input(self, input_data: InputT) -> None:
        """Input validation (override when needed)"""
        if input_data is None:
            raise ValueError(f"{self.name}: input data is None")

    def _validate_output(self, output_data: OutputT) -> None:
        """Output validation (override when needed)"""
        if output_data is None:
            raise ValueError(f"{self.name}: output data is None")

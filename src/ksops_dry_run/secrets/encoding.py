"""YAML stream encoding for stubbed secrets.

Secrets are written as a multi-document YAML stream, one document per secret,
separated by the standard '---' marker. Each document is emitted as soon as it
is encoded, so output appears incrementally while files are processed.
"""

from types import TracebackType
from typing import TextIO

import yaml

from ksops_dry_run.exceptions import EncodeError
from ksops_dry_run.models import SecretResource


class SecretStreamEncoder:
    """Incremental multi-document YAML encoder.

    The encoder must be closed once the last document has been written, which
    ends the YAML stream and flushes the underlying output. It can be used as
    a context manager, in which case it is closed on a clean exit.

    Attributes:
        stream: The text stream documents are written to.

    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._dumper = yaml.SafeDumper(stream, default_flow_style=False, sort_keys=False, allow_unicode=True)
        self._opened = False
        self._closed = False

    def encode(self, secret: SecretResource) -> None:
        """Write a secret as the next document of the stream.

        Args:
            secret: The secret to write.

        Raises:
            EncodeError: If the secret cannot be serialized or written.

        """
        if self._closed:
            raise EncodeError("Cannot encode a secret after the stream was closed")
        try:
            if not self._opened:
                self._dumper.open()
                self._opened = True
            self._dumper.represent(secret.to_dict())
        except (yaml.YAMLError, OSError) as err:
            raise EncodeError(f"Failed to encode secret '{secret.metadata.name}': {err}") from err

    def close(self) -> None:
        """End the YAML stream and flush the output.

        Raises:
            EncodeError: If the stream cannot be finalized.

        """
        if self._closed:
            return
        self._closed = True
        try:
            if self._opened:
                self._dumper.close()
            self.stream.flush()
        except (yaml.YAMLError, OSError) as err:
            raise EncodeError(f"Failed to finalize the output stream: {err}") from err
        finally:
            self._dumper.dispose()

    def __enter__(self) -> "SecretStreamEncoder":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.close()

"""Response envelope and request/response models of the HTTP API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

SUCCESS_CODE = 10000
FAIL_CODE = 10001
FAIL_MESSAGE = "失败"


def _plain(value: Any) -> Any:
    """Turn models, enums and containers into JSON-ready values."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


@dataclass
class Result:
    """The envelope every endpoint answers with."""

    code: int
    msg: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "msg": self.msg, "data": _plain(self.data)}


class PushType(IntEnum):
    """How files are pushed: over NFS or FTP."""

    NFS = 0
    FTP = 1


@dataclass
class L2Algorithm:
    """An L2 product algorithm."""

    group_name: str = ""
    kind_group: str = ""
    algo_name: str = ""
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "groupName": self.group_name,
            "kindGroup": self.kind_group,
            "algoName": self.algo_name,
            "name": self.name,
        }


@dataclass
class PushConfigModel:
    """A push configuration as sent by clients."""

    id: int = 0
    satellite: str = ""
    save_status: int = 0
    file_level: str = ""
    l2_algorithms: list[L2Algorithm] = field(default_factory=list)
    push_type: PushType = PushType.NFS
    nfs_path: str = ""
    ftp_host: str = ""
    ftp_port: int = 0
    ftp_name: str = ""
    ftp_passwd: str = ""
    test_key: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "satellite": self.satellite,
            "saveStatus": self.save_status,
            "fileLevel": self.file_level,
            "l2Algorithms": _plain(self.l2_algorithms),
            "pushType": int(self.push_type),
            "nfsPath": self.nfs_path,
            "ftpHost": self.ftp_host,
            "ftpPort": self.ftp_port,
            "ftpName": self.ftp_name,
            "ftpPasswd": self.ftp_passwd,
            "testKey": self.test_key,
        }


@dataclass
class HealthResp:
    """Answer of the health check."""

    satellite: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"satellite": self.satellite}


@dataclass
class SatelliteFileLevelConfig:
    """Whether one file level is enabled, and where its files live."""

    enable: bool = False
    path: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"enable": self.enable, "path": self.path}


@dataclass
class SatelliteFileLevel:
    """File level configuration of a satellite."""

    satellite: str = ""
    l0: SatelliteFileLevelConfig = field(default_factory=SatelliteFileLevelConfig)
    l1: SatelliteFileLevelConfig = field(default_factory=SatelliteFileLevelConfig)
    l2: SatelliteFileLevelConfig = field(default_factory=SatelliteFileLevelConfig)
    l2_algorithms: list[L2Algorithm] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "satellite": self.satellite,
            "L0": self.l0.to_dict(),
            "L1": self.l1.to_dict(),
            "L2": self.l2.to_dict(),
            "l2Algorithms": _plain(self.l2_algorithms),
        }


def success(data: Any) -> Result:
    """A successful result carrying ``data``."""
    return Result(code=SUCCESS_CODE, msg="", data=data)


def fail(data: Any) -> Result:
    """A failed result with the default message."""
    return Result(code=FAIL_CODE, msg=FAIL_MESSAGE, data=data)


def fail_with_msg(msg: str, data: Any) -> Result:
    """A failed result with a custom message."""
    return Result(code=FAIL_CODE, msg=msg, data=data)


def fail_with_code_msg(code: int, msg: str, data: Any) -> Result:
    """A result with a custom code and message."""
    return Result(code=code, msg=msg, data=data)
"""Ajustes post-decode del modelo de endpoints.

Se aplican a cada partición salvo con `DecodeModelOptions.skip_customizations`.
Cada ajuste comprueba primero que el modelo tiene la forma esperada; si no,
lo registra como warning y deja la partición intacta.
"""

from __future__ import annotations

import logging

from endpointgen.core.domain.models import CredentialScope, DefaultKey, Endpoint, EndpointKey, Partition

logger = logging.getLogger(__name__)

_AWS_GLOBAL = "aws-global"
_US_EAST_1 = "us-east-1"
_APP_AUTOSCALING = "application-autoscaling"
_APP_AUTOSCALING_HOSTNAME = "autoscaling.{region}.amazonaws.com"


def regional_s3(partition: Partition) -> None:
    """Añade el endpoint global `aws-global` a S3 si el modelo no lo trae."""

    if partition.id != "aws":
        return
    service = partition.services.get("s3")
    if service is None:
        return
    if EndpointKey(region=_AWS_GLOBAL) in service.endpoints:
        return

    service.partition_endpoint = _AWS_GLOBAL
    service.endpoints.setdefault(EndpointKey(region=_US_EAST_1), Endpoint())
    service.endpoints[EndpointKey(region=_AWS_GLOBAL)] = Endpoint(
        hostname="s3.amazonaws.com",
        credential_scope=CredentialScope(region=_US_EAST_1),
    )


def remove_iot_data_service(partition: Partition) -> None:
    partition.services.pop("data.iot", None)


def fix_app_autoscaling_china(partition: Partition) -> None:
    if partition.id != "aws-cn":
        return
    service = partition.services.get(_APP_AUTOSCALING)
    if service is None:
        return

    default = service.defaults.get(DefaultKey(), Endpoint())
    if default.hostname != _APP_AUTOSCALING_HOSTNAME:
        logger.warning(
            "fix_app_autoscaling_china: ignoring customization, expected %s, got %s",
            _APP_AUTOSCALING_HOSTNAME,
            default.hostname,
        )
        return

    service.defaults[DefaultKey()] = default.model_copy(
        update={"hostname": _APP_AUTOSCALING_HOSTNAME + ".cn"},
    )


def fix_app_autoscaling_us_gov(partition: Partition) -> None:
    if partition.id != "aws-us-gov":
        return
    service = partition.services.get(_APP_AUTOSCALING)
    if service is None:
        return

    default = service.defaults.get(DefaultKey(), Endpoint())
    if default.credential_scope.service:
        logger.warning(
            "fix_app_autoscaling_us_gov: ignoring customization, "
            "expected empty credential scope service, got %s",
            default.credential_scope.service,
        )
        return
    if default.hostname:
        logger.warning(
            "fix_app_autoscaling_us_gov: ignoring customization, expected empty hostname, got %s",
            default.hostname,
        )
        return

    service.defaults[DefaultKey()] = default.model_copy(
        update={
            "hostname": _APP_AUTOSCALING_HOSTNAME,
            "credential_scope": default.credential_scope.model_copy(update={"service": _APP_AUTOSCALING}),
        },
    )


CUSTOMIZATIONS = (
    regional_s3,
    remove_iot_data_service,
    fix_app_autoscaling_china,
    fix_app_autoscaling_us_gov,
)


def apply_customizations(partition: Partition) -> None:
    for customization in CUSTOMIZATIONS:
        customization(partition)

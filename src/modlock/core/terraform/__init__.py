"""Terraform process integration."""

from modlock.core.terraform.abc import Terraform
from modlock.core.terraform.fake import FakeTerraform
from modlock.core.terraform.real import RealTerraform

__all__ = ["FakeTerraform", "RealTerraform", "Terraform"]

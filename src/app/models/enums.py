"""Shared enums for models."""

from enum import Enum


class FormOfContract(str, Enum):
    """UK standard forms of construction contract."""

    NEC4 = "NEC4"
    NEC3 = "NEC3"
    JCT = "JCT"
    JCT_DESIGN_AND_BUILD = "JCT Design and Build"
    JCT_INTERMEDIATE = "JCT Intermediate"
    JCT_MINOR_WORKS = "JCT Minor Works"
    FIDIC = "FIDIC"
    PPC2000 = "PPC2000"
    TAC_1 = "TAC-1"
    OTHER = "Other"


class OrganizationRole(str, Enum):
    """The user's organisation's role under the contract."""

    EMPLOYER = "Employer"
    CLIENT = "Client"
    CONTRACTOR = "Contractor"
    SUBCONTRACTOR = "Subcontractor"
    CONSULTANT = "Consultant"
    PROJECT_MANAGER = "Project Manager"
    CONTRACT_ADMINISTRATOR = "Contract Administrator"
    SUPPLIER = "Supplier"
    OTHER = "Other"

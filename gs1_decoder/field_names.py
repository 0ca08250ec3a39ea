"""
Human-readable field names for decoded AIs.

Used to re-key decode results for collaborators that address fields by
meaning ("Expiry Date") rather than by AI number. Measure AIs are named by
their three-digit stem, so 3102 and 3103 both map to the net weight field.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class GS1Field(str, Enum):
    """Named GS1 fields."""
    SSCC = "SSCC"
    GTIN = "GTIN Code"
    CONTENT = "Content GTIN"
    MTO_GTIN = "Made-to-Order GTIN"
    BATCH = "Batch/Lot Number"
    PRODUCTION_DATE = "Production Date"
    DUE_DATE = "Due Date"
    PACKAGING_DATE = "Packaging Date"
    BEST_BEFORE_DATE = "Best Before Date"
    SELL_BY_DATE = "Sell By Date"
    EXPIRY_DATE = "Expiry Date"
    VARIANT = "Variant"
    SERIAL = "Serial Number"
    CONSUMER_PRODUCT_VARIANT = "Consumer Product Variant"
    THIRD_PARTY_CONTROLLED = "Third Party Controlled"
    ADDITIONAL_ID = "Additional Product Identification"
    CUSTOMER_PART_NUMBER = "Customer Part Number"
    MTO_VARIANT = "Made-to-Order Variation Number"
    PCN = "Packaging Component Number"
    SECONDARY_SERIAL = "Secondary Serial Number"
    REF_TO_SOURCE = "Reference to Source Entity"
    GDTI = "Global Document Type Identifier"
    GLN_EXTENSION = "GLN Extension Component"
    GCN = "Global Coupon Number"
    VAR_COUNT = "Variable Count"
    NET_WEIGHT_KG = "Net Weight (kg)"
    LENGTH_M = "Length (m)"
    WIDTH_M = "Width (m)"
    HEIGHT_M = "Height (m)"
    AREA_M2 = "Area (m²)"
    NET_VOLUME_L = "Net Volume (l)"
    NET_VOLUME_M3 = "Net Volume (m³)"
    NET_WEIGHT_LB = "Net Weight (lb)"
    GROSS_WEIGHT_KG = "Gross Weight (kg)"
    COUNT = "Count of Trade Items"
    AMOUNT = "Amount Payable"
    AMOUNT_ISO = "Amount Payable with ISO Currency"
    PRICE = "Price"
    PRICE_ISO = "Price with ISO Currency"
    PERCENT_OFF = "Percentage Discount"
    ORDER_NUMBER = "Customer Purchase Order Number"
    GINC = "Global Identification Number for Consignment"
    GSIN = "Global Shipment Identification Number"
    ROUTE = "Routing Code"
    SHIP_TO_LOC = "Ship To Location"
    BILL_TO = "Bill To Location"
    PURCHASE_FROM = "Purchased From Location"
    SHIP_FOR_LOC = "Ship For Location"
    LOC_NO = "Physical Location"
    PAY_TO = "Invoicing Party"
    PROD_SERV_LOC = "Production/Service Location"
    SHIP_TO_POST = "Ship To Postal Code"
    SHIP_TO_POST_ISO = "Ship To Postal Code with ISO Country"
    ORIGIN = "Country of Origin"
    COUNTRY_INITIAL_PROCESS = "Country of Initial Processing"
    COUNTRY_PROCESS = "Country of Processing"
    COUNTRY_DISASSEMBLY = "Country of Disassembly"
    COUNTRY_FULL_PROCESS = "Country of Full Processing"
    ORIGIN_SUBDIVISION = "Country Subdivision of Origin"
    SHIP_TO_COMP = "Ship To Company"
    SHIP_TO_NAME = "Ship To Contact"
    SHIP_TO_ADD1 = "Ship To Address Line 1"
    SHIP_TO_ADD2 = "Ship To Address Line 2"
    SHIP_TO_SUB = "Ship To Suburb"
    SHIP_TO_LOCALITY = "Ship To Locality"
    SHIP_TO_REG = "Ship To Region"
    SHIP_TO_COUNTRY = "Ship To Country"
    SHIP_TO_PHONE = "Ship To Phone"
    SHIP_TO_GEO = "Ship To Geolocation"
    RTN_TO_COMP = "Return To Company"
    RTN_TO_NAME = "Return To Contact"
    RTN_TO_ADD1 = "Return To Address Line 1"
    RTN_TO_ADD2 = "Return To Address Line 2"
    RTN_TO_SUB = "Return To Suburb"
    RTN_TO_LOC = "Return To Locality"
    RTN_TO_REG = "Return To Region"
    RTN_TO_COUNTRY = "Return To Country"
    RTN_TO_POST = "Return To Postal Code"
    RTN_TO_PHONE = "Return To Phone"
    SRV_DESCRIPTION = "Service Code Description"
    DANGEROUS_GOODS = "Dangerous Goods Flag"
    AUTH_LEAVE = "Authority to Leave"
    SIG_REQUIRED = "Signature Required"
    NBEF_DEL_DT = "Not Before Delivery Date"
    NAFT_DEL_DT = "Not After Delivery Date"
    REL_DATE = "Release Date"
    MAX_TEMP_F = "Maximum Temperature (F)"
    MAX_TEMP_C = "Maximum Temperature (C)"
    MIN_TEMP_F = "Minimum Temperature (F)"
    MIN_TEMP_C = "Minimum Temperature (C)"
    NSN = "NATO Stock Number"
    MEAT_CUT = "UN/ECE Meat Carcasses and Cuts"
    EXPIRY_TIME = "Expiry Date and Time"
    ACTIVE_POTENCY = "Active Potency"
    HARVEST_DATE = "First Freeze Date"
    GRAI = "Global Returnable Asset Identifier"
    GIAI = "Global Individual Asset Identifier"
    PRICE_PER_UNIT = "Price per Unit of Measure"
    ITIP = "Individual Trade Item Piece"
    IBAN = "International Bank Account Number"
    PROD_TIME = "Date and Time of Production"
    GSRN_PROVIDER = "GSRN Provider"
    GSRN_RECIPIENT = "GSRN Recipient"
    SRIN = "Service Relation Instance Number"
    COUPON_EXT = "Coupon Extended Code"
    COUPON_CODE = "Coupon Code"
    PRODUCT_URL = "Product URL"
    INTERNAL = "Internal Company Code"


AI_FIELD_NAMES: Dict[str, GS1Field] = {
    "00": GS1Field.SSCC,
    "01": GS1Field.GTIN,
    "02": GS1Field.CONTENT,
    "03": GS1Field.MTO_GTIN,
    "10": GS1Field.BATCH,
    "11": GS1Field.PRODUCTION_DATE,
    "12": GS1Field.DUE_DATE,
    "13": GS1Field.PACKAGING_DATE,
    "15": GS1Field.BEST_BEFORE_DATE,
    "16": GS1Field.SELL_BY_DATE,
    "17": GS1Field.EXPIRY_DATE,
    "20": GS1Field.VARIANT,
    "21": GS1Field.SERIAL,
    "22": GS1Field.CONSUMER_PRODUCT_VARIANT,
    "235": GS1Field.THIRD_PARTY_CONTROLLED,
    "240": GS1Field.ADDITIONAL_ID,
    "241": GS1Field.CUSTOMER_PART_NUMBER,
    "242": GS1Field.MTO_VARIANT,
    "243": GS1Field.PCN,
    "250": GS1Field.SECONDARY_SERIAL,
    "251": GS1Field.REF_TO_SOURCE,
    "253": GS1Field.GDTI,
    "254": GS1Field.GLN_EXTENSION,
    "255": GS1Field.GCN,
    "30": GS1Field.VAR_COUNT,
    "310": GS1Field.NET_WEIGHT_KG,
    "311": GS1Field.LENGTH_M,
    "312": GS1Field.WIDTH_M,
    "313": GS1Field.HEIGHT_M,
    "314": GS1Field.AREA_M2,
    "315": GS1Field.NET_VOLUME_L,
    "316": GS1Field.NET_VOLUME_M3,
    "320": GS1Field.NET_WEIGHT_LB,
    "330": GS1Field.GROSS_WEIGHT_KG,
    "37": GS1Field.COUNT,
    "390": GS1Field.AMOUNT,
    "391": GS1Field.AMOUNT_ISO,
    "392": GS1Field.PRICE,
    "393": GS1Field.PRICE_ISO,
    "394": GS1Field.PERCENT_OFF,
    "400": GS1Field.ORDER_NUMBER,
    "401": GS1Field.GINC,
    "402": GS1Field.GSIN,
    "403": GS1Field.ROUTE,
    "410": GS1Field.SHIP_TO_LOC,
    "411": GS1Field.BILL_TO,
    "412": GS1Field.PURCHASE_FROM,
    "413": GS1Field.SHIP_FOR_LOC,
    "414": GS1Field.LOC_NO,
    "415": GS1Field.PAY_TO,
    "416": GS1Field.PROD_SERV_LOC,
    "420": GS1Field.SHIP_TO_POST,
    "421": GS1Field.SHIP_TO_POST_ISO,
    "422": GS1Field.ORIGIN,
    "423": GS1Field.COUNTRY_INITIAL_PROCESS,
    "424": GS1Field.COUNTRY_PROCESS,
    "425": GS1Field.COUNTRY_DISASSEMBLY,
    "426": GS1Field.COUNTRY_FULL_PROCESS,
    "427": GS1Field.ORIGIN_SUBDIVISION,
    "4300": GS1Field.SHIP_TO_COMP,
    "4301": GS1Field.SHIP_TO_NAME,
    "4302": GS1Field.SHIP_TO_ADD1,
    "4303": GS1Field.SHIP_TO_ADD2,
    "4304": GS1Field.SHIP_TO_SUB,
    "4305": GS1Field.SHIP_TO_LOCALITY,
    "4306": GS1Field.SHIP_TO_REG,
    "4307": GS1Field.SHIP_TO_COUNTRY,
    "4308": GS1Field.SHIP_TO_PHONE,
    "4309": GS1Field.SHIP_TO_GEO,
    "4310": GS1Field.RTN_TO_COMP,
    "4311": GS1Field.RTN_TO_NAME,
    "4312": GS1Field.RTN_TO_ADD1,
    "4313": GS1Field.RTN_TO_ADD2,
    "4314": GS1Field.RTN_TO_SUB,
    "4315": GS1Field.RTN_TO_LOC,
    "4316": GS1Field.RTN_TO_REG,
    "4317": GS1Field.RTN_TO_COUNTRY,
    "4318": GS1Field.RTN_TO_POST,
    "4319": GS1Field.RTN_TO_PHONE,
    "4320": GS1Field.SRV_DESCRIPTION,
    "4321": GS1Field.DANGEROUS_GOODS,
    "4322": GS1Field.AUTH_LEAVE,
    "4323": GS1Field.SIG_REQUIRED,
    "4324": GS1Field.NBEF_DEL_DT,
    "4325": GS1Field.NAFT_DEL_DT,
    "4326": GS1Field.REL_DATE,
    "4330": GS1Field.MAX_TEMP_F,
    "4331": GS1Field.MAX_TEMP_C,
    "4332": GS1Field.MIN_TEMP_F,
    "4333": GS1Field.MIN_TEMP_C,
    "7001": GS1Field.NSN,
    "7002": GS1Field.MEAT_CUT,
    "7003": GS1Field.EXPIRY_TIME,
    "7004": GS1Field.ACTIVE_POTENCY,
    "7006": GS1Field.HARVEST_DATE,
    "8003": GS1Field.GRAI,
    "8004": GS1Field.GIAI,
    "8005": GS1Field.PRICE_PER_UNIT,
    "8006": GS1Field.ITIP,
    "8007": GS1Field.IBAN,
    "8008": GS1Field.PROD_TIME,
    "8017": GS1Field.GSRN_PROVIDER,
    "8018": GS1Field.GSRN_RECIPIENT,
    "8019": GS1Field.SRIN,
    "8101": GS1Field.COUPON_EXT,
    "8110": GS1Field.COUPON_CODE,
    "8200": GS1Field.PRODUCT_URL,
    "90": GS1Field.INTERNAL,
}


def field_for_ai(ai: str) -> Optional[GS1Field]:
    """
    Look up the named field of a decoded AI.

    Exact AIs are tried first; four-digit measure AIs fall back to their
    three-digit stem ("3103" -> "310").
    """
    field = AI_FIELD_NAMES.get(ai)
    if field is None and len(ai) == 4:
        field = AI_FIELD_NAMES.get(ai[:3])
    return field


def field_name(ai: str) -> str:
    """Human-readable name of an AI, "AI(nn)" when it has none."""
    field = field_for_ai(ai)
    return field.value if field is not None else f"AI({ai})"

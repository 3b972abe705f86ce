"""Delivery address bodies sent when filling in a cart."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Mapping

AREA_CODES: tuple[int, ...] = (
    205, 251, 256, 334, 938,
    907,
    480, 520, 602, 623, 928,
    479, 501, 870,
    209, 213, 310, 323, 408, 415, 424, 442, 510, 530, 559, 562, 619, 626, 650,
    657, 661, 707, 714, 760, 805, 818, 831, 858, 909, 916, 925, 949, 951,
    303, 719, 970,
    203, 475, 860, 959,
    202,
    302,
    239, 305, 321, 352, 386, 407, 561, 727, 754, 772, 786, 813, 850, 863, 904,
    941, 954,
    229, 404, 470, 478, 678, 706, 762, 770, 912,
    808,
    208, 986,
    217, 224, 309, 312, 331, 447, 464, 618, 630, 708, 773, 779, 815, 847, 872,
    219, 260, 317, 463, 574, 765, 812, 930,
    319, 515, 563, 641, 712,
    316, 620, 785, 913,
    270, 364, 502, 606, 859, 270, 502,
    225, 318, 337, 504, 985,
    207,
    240, 301, 410, 443, 667,
    339, 351, 413, 508, 617, 774, 781, 857, 978,
    231, 248, 269, 313, 517, 586, 616, 734, 810, 906, 947, 989,
    218, 320, 507, 612, 651, 763, 952,
    228, 601, 662, 769,
    314, 417, 573, 636, 660, 816,
    406,
    308, 402, 531,
    702, 725, 775,
    603,
    201, 551, 609, 732, 848, 862, 908, 973,
    505, 575,
    212, 315, 332, 347, 516, 518, 585, 607, 631, 646, 716, 718, 845, 914, 917,
    929,
    252, 336, 704, 743, 828, 910, 919, 980, 984,
    701,
    216, 234, 283, 330, 380, 419, 440, 513, 567, 614, 740, 937,
    405, 539, 580, 918,
    458, 503, 541, 971,
    215, 223, 267, 272, 412, 484, 570, 610, 717, 724, 814, 878,
    401,
    803, 839, 843, 854, 864,
    605,
    423, 615, 629, 731, 865, 901, 931,
    210, 214, 254, 281, 325, 346, 361, 409, 430, 432, 469, 512, 682, 713, 737,
    806, 817, 830, 832, 903, 915, 936, 940, 956, 972, 979,
    385, 435, 801,
    802,
    276, 434, 540, 571, 703, 757, 804, 821,
    206, 253, 360, 425, 509, 564,
    304, 681,
    262, 274, 414, 534, 608, 715, 920,
    307,
)


def generate_phone(rng: random.Random | None = None) -> str:
    """Make up a US phone number that the service accepts, for privacy."""
    rng = rng or random.Random()
    three_digits = 100 + rng.randrange(900)
    four_digits = 1000 + rng.randrange(9000)
    area = rng.choice(AREA_CODES)
    return f"({area}) {three_digits}-{four_digits}"


def _coordinate_text(value: float | str) -> str:
    return value if isinstance(value, str) else f"{value:f}"


@dataclass
class DeliveryInfo:
    """Full delivery address attached to a cart."""

    address_locality: str
    address_region: str
    email: str
    latitude: float | str
    longitude: float | str
    postal_code: str
    street_address1: str
    phone: str = field(default_factory=generate_phone)
    address_country: str = "US"
    green_indicated: bool = False
    name: str = "Wii Eat"

    def __post_init__(self) -> None:
        self.latitude = _coordinate_text(self.latitude)
        self.longitude = _coordinate_text(self.longitude)

    def serialize(self) -> dict[str, Any]:
        return {
            "address_country": self.address_country,
            "address_locality": self.address_locality,
            "address_region": self.address_region,
            "email": self.email,
            "green_indicated": self.green_indicated,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "name": self.name,
            "phone": self.phone,
            "postal_code": self.postal_code,
            "street_address1": self.street_address1,
        }


@dataclass
class IncompleteDelivery:
    """Coordinates-only delivery location."""

    latitude: float | str
    longitude: float | str

    def __post_init__(self) -> None:
        self.latitude = _coordinate_text(self.latitude)
        self.longitude = _coordinate_text(self.longitude)

    def serialize(self) -> dict[str, Any]:
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def deserialize(cls, root: Mapping[str, Any]) -> IncompleteDelivery:
        values = []
        for key in ("latitude", "longitude"):
            if key not in root:
                raise KeyError(key)
            if not isinstance(root[key], str):
                raise TypeError(f"field {key!r} must be str")
            values.append(root[key])
        return cls(*values)
"""Static Fall 2024 enrolment dataset.

Source: Fall 2024 full-time and part-time fall enrolment at Canadian universities.
"""

from dataclasses import dataclass

# Fixed category order; each name is also the translation key of its label
ENROLMENT_CATEGORIES = ("ft_undergrad", "ft_grad", "pt_undergrad")


@dataclass(frozen=True)
class UniversityRecord:
    """
    One institution's Fall enrolment snapshot.

    The name is both the display label and the selection key, so it must be
    unique within a dataset.

    Attributes:
        name (str): Display name and selection key.
        ft_undergrad (int): Full-time undergraduate enrolment.
        ft_grad (int): Full-time graduate enrolment.
        pt_undergrad (int): Part-time undergraduate enrolment.
        is_placeholder (bool): True when the figures are not sourced data.
    """
    name: str
    ft_undergrad: int
    ft_grad: int
    pt_undergrad: int
    is_placeholder: bool = False

    def __post_init__(self):
        for category in ENROLMENT_CATEGORIES:
            if getattr(self, category) < 0:
                raise ValueError(f"{self.name}: {category} must be non-negative")

    def category_value(self, category):
        """Return the count for one of ENROLMENT_CATEGORIES."""
        if category not in ENROLMENT_CATEGORIES:
            raise KeyError(category)
        return getattr(self, category)


def build_dataset(records):
    """
    Freezes an ordered sequence of records into the dataset tuple.

    Args:
        records (iterable): UniversityRecord instances in display order.

    Returns:
        tuple: The records, order preserved.

    Raises:
        ValueError: If the sequence is empty or two records share a name.
    """
    dataset = tuple(records)
    if not dataset:
        raise ValueError("Dataset must contain at least one university")
    seen = set()
    for record in dataset:
        if record.name in seen:
            raise ValueError(f"Duplicate university name {record.name!r}")
        seen.add(record.name)
    return dataset


UNIVERSITY_DATA = build_dataset([
    UniversityRecord('Algoma University', ft_undergrad=5700, ft_grad=70, pt_undergrad=480),
    # Placeholder figures, not sourced data
    UniversityRecord('Brescia University College', ft_undergrad=1500, ft_grad=0, pt_undergrad=100,
                     is_placeholder=True),
    UniversityRecord('Brock University', ft_undergrad=15600, ft_grad=1800, pt_undergrad=1700),
    UniversityRecord('Carleton University', ft_undergrad=19600, ft_grad=3900, pt_undergrad=5500),
])


def find_university(name, dataset=UNIVERSITY_DATA):
    """Return the record called ``name``, or None if there is none."""
    for record in dataset:
        if record.name == name:
            return record
    return None

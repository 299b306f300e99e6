"""FilterSet definitions for property search."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Property


class PropertySearchFilterSet(django_filters.FilterSet):
    """Optional-predicate search: each supplied filter narrows the result (AND)."""

    search = django_filters.CharFilter(method="filter_search")
    city_id = django_filters.UUIDFilter(field_name="city_id", lookup_expr="exact")
    property_type_id = django_filters.UUIDFilter(field_name="property_type_id", lookup_expr="exact")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")

    class Meta:
        model = Property
        fields = ["search", "city_id", "property_type_id", "max_price"]

    def filter_search(self, queryset, name, value):  # type: ignore
        if not value:
            return queryset
        # icontains; SQLite folds case for ASCII letters only
        return queryset.filter(Q(title__icontains=value) | Q(description__icontains=value))

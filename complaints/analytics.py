# analytics.py
# 관리자 대시보드 통계 (상태별 합계, 분류별/우선순위별 건수, 최근 6개월 추이)
import calendar

from django.db.models import Count
from django.db.models.functions import ExtractMonth, ExtractYear
from django.utils import timezone

from .models import Complaint

TREND_MONTHS = 6


def months_ago(moment, months):
    """moment에서 months개월 전 같은 날짜/시각 (말일은 해당 월의 마지막 날로 맞춤)"""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _grouped_counts(queryset, field):
    rows = (
        queryset.values(field)
        .annotate(count=Count('id'))
        .order_by('-count', field)
    )
    return [{'_id': row[field], 'count': row['count']} for row in rows]


def status_overview(queryset):
    counts = dict(
        queryset.values_list('status')
        .annotate(count=Count('id'))
        .order_by()
    )
    open_count = counts.get(Complaint.Status.OPEN, 0)
    in_progress_count = counts.get(Complaint.Status.IN_PROGRESS, 0)
    resolved_count = counts.get(Complaint.Status.RESOLVED, 0)
    closed_count = counts.get(Complaint.Status.CLOSED, 0)

    return {
        'totalComplaints': open_count + in_progress_count + resolved_count + closed_count,
        'openComplaints': open_count,
        'inProgressComplaints': in_progress_count,
        'resolvedComplaints': resolved_count,
        'closedComplaints': closed_count,
    }


def monthly_trend(queryset, now=None, months=TREND_MONTHS):
    """최근 months개월 동안 등록된 민원을 (연, 월) 별로 묶어 오래된 순으로 반환"""
    since = months_ago(now or timezone.now(), months)
    rows = (
        queryset.filter(created_at__gte=since)
        .annotate(year=ExtractYear('created_at'), month=ExtractMonth('created_at'))
        .values('year', 'month')
        .annotate(count=Count('id'))
        .order_by('year', 'month')
    )
    return [{'_id': {'year': row['year'], 'month': row['month']}, 'count': row['count']} for row in rows]


def dashboard(now=None):
    queryset = Complaint.objects.all()
    return {
        'overview': status_overview(queryset),
        'complaintsByCategory': _grouped_counts(queryset, 'category'),
        'complaintsByPriority': _grouped_counts(queryset, 'priority'),
        'monthlyTrend': monthly_trend(queryset, now=now),
    }

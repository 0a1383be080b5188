from django.http import JsonResponse

from frontdesk.services.tables import table_sizes


def healthz(request):
    return JsonResponse({'ok': True, 'tables': table_sizes()})

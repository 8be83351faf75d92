import flet as ft

from .config import UNKNOWN
from .controller import WeatherController
from .models import VIEW_THREE_DAY, VIEW_TODAY, ViewState
from .regions import region_names

VIEW_LABELS = {
    VIEW_TODAY: "今日の天気",
    VIEW_THREE_DAY: "3日間の天気",
}


def weather_icon(weather: str | None):
    w = weather or ""
    if "雪" in w:
        return ft.Icons.AC_UNIT
    if "雨" in w:
        return ft.Icons.UMBRELLA
    if "曇" in w or "くもり" in w:
        return ft.Icons.CLOUD
    if "晴" in w:
        return ft.Icons.WB_SUNNY
    return ft.Icons.HELP_OUTLINE if w == UNKNOWN else ft.Icons.WB_CLOUDY


def today_card(state: ViewState) -> ft.Control:
    t = state.today
    return ft.Card(
        elevation=3,
        color="white",
        content=ft.Container(
            padding=15,
            width=280,
            content=ft.Column(
                [
                    ft.Text(f"{t.date} の天気", weight=ft.FontWeight.BOLD, size=18),
                    ft.Row(
                        [
                            ft.Icon(weather_icon(t.weather), size=40, color="#ff9800"),
                            ft.Text(t.weather, size=16),
                        ],
                        alignment=ft.MainAxisAlignment.START,
                    ),
                    ft.Divider(),
                    ft.Text(f"気温: {t.temperature}", color="#e53935", size=14),
                    ft.Text(f"降水確率: {t.precipitation}", color="#1976d2", size=14),
                ],
                spacing=5,
            ),
        ),
    )


def three_day_table(state: ViewState) -> ft.Control:
    days = state.three_day
    return ft.DataTable(
        bgcolor="white",
        border=ft.border.all(1, "#90a4ae"),
        vertical_lines=ft.BorderSide(1, "#cfd8dc"),
        columns=[ft.DataColumn(ft.Text(" "))]
        + [ft.DataColumn(ft.Text(d.date, weight=ft.FontWeight.BOLD)) for d in days],
        rows=[
            ft.DataRow(
                cells=[ft.DataCell(ft.Text("天気"))]
                + [
                    ft.DataCell(
                        ft.Row([ft.Icon(weather_icon(d.weather), size=18, color="#ff9800"), ft.Text(d.weather)])
                    )
                    for d in days
                ]
            ),
            ft.DataRow(
                cells=[ft.DataCell(ft.Text("最高気温"))]
                + [ft.DataCell(ft.Text(d.max_temp, color="#e53935")) for d in days]
            ),
            ft.DataRow(
                cells=[ft.DataCell(ft.Text("最低気温"))]
                + [ft.DataCell(ft.Text(d.min_temp, color="#1976d2")) for d in days]
            ),
        ],
    )


def forecast_body(state: ViewState) -> ft.Control:
    if state.is_loading:
        return ft.Row([ft.ProgressRing(width=20, height=20), ft.Text("読み込み中...")])
    if state.error:
        return ft.Text(f"エラー: {state.error}", color="red")
    if state.view_mode == VIEW_TODAY and state.today:
        return today_card(state)
    if state.view_mode == VIEW_THREE_DAY and state.three_day:
        return ft.Column(
            [ft.Text("3日間の天気予報", size=18, weight=ft.FontWeight.BOLD), three_day_table(state)],
            spacing=10,
        )
    return ft.Text("データがありません")


def run_app(page: ft.Page):
    page.title = "天気予報アプリ"
    page.window.width = 1000
    page.window.height = 640
    page.bgcolor = "#b0bec5"

    page.appbar = ft.AppBar(
        leading=ft.Icon(ft.Icons.WB_SUNNY, color="white"),
        title=ft.Text("天気予報アプリ", color="white"),
        center_title=True,
        bgcolor="#3f2aa5",
    )

    region_list = ft.Column(spacing=2)

    view_switch = ft.SegmentedButton(
        selected={VIEW_TODAY},
        segments=[ft.Segment(value=mode, label=ft.Text(label)) for mode, label in VIEW_LABELS.items()],
    )

    left_panel = ft.Container(
        bgcolor="#78909c",
        width=220,
        padding=15,
        content=ft.Column(
            [
                ft.Text("地域を選択してください。", size=11, color="#eeeeee"),
                ft.Divider(height=10, color="transparent"),
                region_list,
            ],
            expand=True,
        ),
    )

    area_title = ft.Text("", size=22, weight=ft.FontWeight.BOLD)
    area_subtitle = ft.Text("", size=12, color="#455a64")
    forecast_area = ft.Container()

    right_panel = ft.Container(
        bgcolor="#b0bec5",
        expand=True,
        padding=20,
        content=ft.Column(
            [area_title, area_subtitle, view_switch, ft.Divider(), forecast_area],
            expand=True,
            scroll="auto",
        ),
    )

    page.add(ft.Row([left_panel, right_panel], expand=True))

    def render(state: ViewState):
        area_title.value = f"{state.selected_region} の天気"
        m = state.meta
        area_subtitle.value = f"{m.area_name} / 発表: {m.publishing_office} {m.report_datetime}" if m else ""

        region_list.controls.clear()
        for name in region_names():
            is_selected = name == state.selected_region
            region_list.controls.append(
                ft.ListTile(
                    title=ft.Text(
                        name,
                        color="white",
                        weight=ft.FontWeight.BOLD if is_selected else ft.FontWeight.NORMAL,
                    ),
                    selected=is_selected,
                    selected_tile_color="#546e7a",
                    on_click=lambda e, n=name: page.run_task(controller.select_region, n),
                )
            )

        view_switch.selected = {state.view_mode}
        forecast_area.content = forecast_body(state)
        page.update()

    controller = WeatherController(on_change=render)

    def on_view_changed(e):
        mode = next(iter(e.control.selected), VIEW_TODAY)
        controller.select_view_mode(mode)

    view_switch.on_change = on_view_changed

    render(controller.state)
    # 起動時にデフォルト地域を読み込む
    page.run_task(controller.select_region, controller.state.selected_region)

# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Demonstration charts, one per chart type and a few combinations.
Each demo is a raw chart description as it would arrive from JSON, with camelCase keys.
Used by the `-demo` command line option, the development web server, and the rendering tests.
'''

from typing import Any


months = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun']


demos:dict[str,dict[str,Any]] = {

  'bar': {
    'title': {'text': 'Quarterly Sales'},
    'xValues': {'default': ['Q1', 'Q2', 'Q3', 'Q4']},
    'series': [
      {'name': 'North', 'type': 'bar', 'data': [120, 135, 160, 150], 'dataLabels': {'enabled': True}},
      {'name': 'South', 'type': 'bar', 'data': [90, 110, 95, 130], 'bar': {'cornerRadius': 3}},
    ],
    'yAxes': [{'title': {'text': 'Units'}}],
  },

  'bar-stacked': {
    'title': {'text': 'Profit and Loss by Division'},
    'xValues': {'default': months[:4]},
    'series': [
      {'name': 'Retail', 'type': 'bar', 'stacked': True, 'data': [10, -3, 5, -8]},
      {'name': 'Online', 'type': 'bar', 'stacked': True, 'data': [6, 4, -2, 7]},
      {'name': 'Wholesale', 'type': 'bar', 'stacked': True, 'data': [3, 3, 3, -4]},
    ],
  },

  'bar-horizontal': {
    'title': {'text': 'Survey Responses'},
    'margin': {'left': 110},
    'xValues': {'default': ['Strongly agree', 'Agree', 'Neutral', 'Disagree']},
    'series': [
      {'name': '2023', 'type': 'bar', 'bar': {'horizontal': True}, 'data': [42, 31, 15, 12], 'dataLabels': {'enabled': True}},
      {'name': '2024', 'type': 'bar', 'bar': {'horizontal': True}, 'data': [48, 29, 13, 10]},
    ],
  },

  'line': {
    'title': {'text': 'Temperature'},
    'xValues': {'default': months},
    'series': [
      {'name': 'Berlin', 'type': 'line', 'data': [1, 2, 6, 10, 15, 18]},
      {'name': 'Madrid', 'type': 'spline', 'data': [7, 9, 12, None, 18, 24], 'line': {'dashArray': '6,3'}},
      {'name': 'Oslo', 'type': 'line', 'data': [-4, -4, 0, 5, None, 14], 'line': {'stepped': True, 'connectNulls': True},
        'point': {'shape': 'diamond', 'size': 8}},
    ],
    'yAxes': [{'title': {'text': 'Degrees C'}}],
  },

  'area-stacked': {
    'title': {'text': 'Traffic Sources'},
    'xValues': {'default': months},
    'series': [
      {'name': 'Search', 'type': 'area', 'stacked': True, 'data': [30, 32, 35, 40, 42, 45],
        'gradient': {'enabled': True}},
      {'name': 'Social', 'type': 'area', 'stacked': True, 'data': [10, 14, 12, 18, 20, 24]},
      {'name': 'Direct', 'type': 'area', 'stacked': True, 'data': [20, 18, 22, 21, 25, 23]},
    ],
  },

  'pie': {
    'title': {'text': 'Market Share'},
    'legend': {'enabled': False},
    'xValues': {'default': ['Alpha', 'Beta', 'Gamma', 'Delta']},
    'series': [
      {'name': 'Share', 'type': 'pie', 'data': [45, 25, 20, 10],
        'dataLabels': {'enabled': True, 'format': '{category}: {percentage}', 'color': '#ffffff'}},
    ],
  },

  'donut': {
    'title': {'text': 'Budget'},
    'legend': {'enabled': False},
    'xValues': {'default': ['Staff', 'Rent', 'Travel', 'Other']},
    'series': [
      {'name': 'Budget', 'type': 'pie', 'data': [60, 20, 12, 8],
        'pie': {'innerRadius': '55%', 'startAngle': 0, 'endAngle': 360}, 'dataLabels': {'enabled': True, 'format': '{percentage}'}},
    ],
  },

  'multipie': {
    'title': {'text': 'Regional Breakdown'},
    'legend': {'enabled': False},
    'series': [
      {'name': 'Region', 'type': 'multipie', 'data': [40, 35, 25], 'multipie': {'group': 'sales', 'ringPosition': 0, 'title': 'Sales'}},
      {'name': 'Product', 'type': 'multipie', 'data': [15, 25, 10, 20, 30], 'multipie': {'group': 'sales', 'ringPosition': 1}},
      {'name': 'Costs', 'type': 'multipie', 'data': [50, 30, 20], 'multipie': {'group': 'costs', 'title': 'Costs'}},
    ],
  },

  'scatter': {
    'title': {'text': 'Height and Weight'},
    'xValues': {'Group A': [160, 165, 170, 175, 180], 'Group B': [155, 162, 168, 171, 185]},
    'series': [
      {'name': 'Group A', 'type': 'scatter', 'data': [55, 62, 68, 72, 80]},
      {'name': 'Group B', 'type': 'scatter', 'data': [50, 58, 61, 70, 88], 'point': {'shape': 'triangle', 'size': 8}},
    ],
    'xAxes': [{'type': 'numeric', 'title': {'text': 'Height (cm)'}}],
  },

  'bubble': {
    'title': {'text': 'Countries'},
    'xValues': {'default': [10, 20, 30, 40, 50]},
    'series': [
      {'name': 'Population', 'type': 'bubble', 'data': [30, 50, 20, 60, 40], 'size': [5, 40, 12, 25, 8],
        'dataLabels': {'enabled': True, 'format': '{z}'}},
    ],
    'xAxes': [{'type': 'numeric'}],
  },

  'radar': {
    'title': {'text': 'Skills'},
    'xValues': {'default': ['Speed', 'Power', 'Range', 'Armor', 'Agility']},
    'series': [
      {'name': 'Scout', 'type': 'radar', 'data': [9, 3, 7, 2, 8]},
      {'name': 'Tank', 'type': 'radar', 'data': [3, 8, 4, 9, 2], 'point': {'enabled': True}},
    ],
  },

  'radar-stacked': {
    'title': {'text': 'Effort by Phase'},
    'xValues': {'default': ['Design', 'Build', 'Test', 'Deploy', 'Support', 'Review']},
    'series': [
      {'name': 'Team A', 'type': 'radar', 'stacked': True, 'data': [4, 6, 3, 2, 5, 3]},
      {'name': 'Team B', 'type': 'radar', 'stacked': True, 'data': [2, 3, 4, 3, 1, 2]},
    ],
  },

  'polar': {
    'title': {'text': 'Wind'},
    'xValues': {'default': [0, 45, 90, 135, 180, 225, 270, 315]},
    'series': [
      {'name': 'Speed', 'type': 'polar', 'data': [12, 8, 5, 9, 14, 11, 7, 10]},
      {'name': 'Gusts', 'type': 'polar', 'data': [20, 15, 9, 14, 22, 18, 12, 16], 'polar': {'area': True}},
    ],
  },

  'waterfall': {
    'title': {'text': 'Cash Flow'},
    'xValues': {'default': ['Start', 'Sales', 'Refunds', 'Subtotal', 'Costs', 'End']},
    'series': [
      {'name': 'Cash', 'type': 'waterfall', 'data': [100, 20, -10, 0, -35, 0],
        'waterfall': {'barTypes': ['initial', 'positive', 'negative', 'subtotal', 'negative', 'total']},
        'dataLabels': {'enabled': True}},
    ],
  },

  'waterfall-horizontal': {
    'title': {'text': 'Headcount'},
    'margin': {'left': 80},
    'xValues': {'default': ['Jan', 'Hires', 'Exits', 'Dec']},
    'series': [
      {'name': 'Staff', 'type': 'waterfall', 'data': [40, 12, -7, 0],
        'waterfall': {'horizontal': True, 'barTypes': ['initial', 'positive', 'negative', 'total'],
          'connectors': {'dashArray': '3,3'}}},
    ],
  },

  'sankey': {
    'title': {'text': 'Energy Flow'},
    'legend': {'enabled': False},
    'series': [
      {'name': 'Energy', 'type': 'sankey', 'data': [],
        'sankey': {
          'nodes': ['Coal', 'Gas', 'Power', 'Homes', 'Industry'],
          'nodeWidth': 20,
          'nodeLabels': {'position': 'right'},
          'links': [
            {'source': 'Coal', 'target': 'Power', 'value': 30},
            {'source': 'Gas', 'target': 'Power', 'value': 20},
            {'source': 'Gas', 'target': 'Industry', 'value': 10},
            {'source': 'Power', 'target': 'Homes', 'value': 35},
            {'source': 'Power', 'target': 'Industry', 'value': 15},
          ],
          'nodeColors': {'Coal': '#555555', 'Gas': '#ff9800'},
        }},
    ],
  },

  'mixed-axes': {
    'title': {'text': 'Revenue and Margin'},
    'xValues': {'default': months},
    'series': [
      {'name': 'Revenue', 'type': 'bar', 'data': [200, 240, 220, 300, 320, 360]},
      {'name': 'Margin', 'type': 'line', 'yAxisId': 1, 'data': [0.12, 0.15, 0.11, 0.18, 0.2, 0.22],
        'dataLabels': {'enabled': True, 'decimals': 2}},
    ],
    'yAxes': [
      {'title': {'text': 'Revenue'}, 'labels': {'prefix': '$'}},
      {'position': 'right', 'min': 0, 'max': 0.3, 'title': {'text': 'Margin'}, 'grid': {'enabled': False}},
    ],
  },

  'log-axis': {
    'title': {'text': 'Growth'},
    'xValues': {'default': ['2019', '2020', '2021', '2022', '2023']},
    'series': [{'name': 'Users', 'type': 'line', 'data': [12, 150, 2_400, 31_000, 450_000]}],
    'yAxes': [{'type': 'log'}],
  },

  'time-axis': {
    'title': {'text': 'Uptime'},
    'xValues': {'default': [1_704_067_200, 1_706_745_600, 1_709_251_200, 1_711_929_600]},
    'series': [{'name': 'Uptime', 'type': 'line', 'data': [99.2, 99.8, 99.5, 99.9]}],
    'xAxes': [{'type': 'time', 'labels': {'dateFormat': '%b %Y'}}],
  },
}

from django import forms
from lolapi.app_lib.regional_riotapi_hosts import RegionalRiotapiHosts

REGION_CHOICES = [(p, p.upper()) for p in ['na1', 'euw1', 'eun1', 'kr', 'jp1', 'br1', 'la1', 'la2', 'oc1', 'tr1', 'ru']]


class SearchForm(forms.Form):
    region = forms.ChoiceField(choices=REGION_CHOICES, initial='na1')
    name = forms.CharField(max_length=255, strip=True,
                           widget=forms.TextInput(attrs={'placeholder': 'Enter summoner name...',
                                                         'list': 'recent-searches'}))
    tagline = forms.CharField(max_length=255, strip=True, required=False,
                              widget=forms.TextInput(attrs={'placeholder': 'Enter tagline (e.g. NA1)...'}))

    def clean_region(self):
        region = self.cleaned_data['region']
        if region not in RegionalRiotapiHosts().get_platforms():
            raise forms.ValidationError('Unknown region {}'.format(region))
        return region

    def clean_name(self):
        name = self.cleaned_data['name']
        # A slash would split the results URL segment
        if '/' in name:
            raise forms.ValidationError('Summoner name cannot contain "/"')
        return name

    def clean_tagline(self):
        tagline = self.cleaned_data['tagline']
        if '/' in tagline:
            raise forms.ValidationError('Tagline cannot contain "/"')
        return tagline

    def clean(self):
        cleaned = super().clean()
        # Tagline defaults to the region, e.g. NA1
        if not cleaned.get('tagline') and cleaned.get('region'):
            cleaned['tagline'] = cleaned['region'].upper()
        return cleaned

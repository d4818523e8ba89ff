from decimal import Decimal
from django import forms

from .models import Currency


AMOUNT_REQUIRED_MESSAGE = 'Please select or enter an amount'


class DonationAmountForm(forms.Form):
    """First wizard step: currency plus a preset or custom amount."""

    currency = forms.ChoiceField(choices=Currency.choices, initial=Currency.INR)
    preset_amount = forms.DecimalField(required=False, max_digits=12, decimal_places=2)
    custom_amount = forms.DecimalField(
        required=False,
        max_digits=12,
        decimal_places=2,
        widget=forms.NumberInput(attrs={'min': '1', 'placeholder': 'Enter amount'}),
    )

    def clean(self):
        cleaned_data = super().clean()
        custom = cleaned_data.get('custom_amount')
        preset = cleaned_data.get('preset_amount')

        # A typed amount wins over a selected preset
        amount = custom if custom is not None else preset
        if amount is None or amount <= Decimal('0'):
            raise forms.ValidationError(AMOUNT_REQUIRED_MESSAGE)

        cleaned_data['amount'] = amount
        return cleaned_data


class DonationDetailsForm(forms.Form):
    """Second wizard step: anonymity and an optional note to the student."""

    is_anonymous = forms.BooleanField(required=False, label='Make this donation anonymous')
    message = forms.CharField(
        required=False,
        max_length=500,
        widget=forms.Textarea(attrs={
            'rows': 3,
            'maxlength': 500,
            'placeholder': 'Your words of encouragement...',
        }),
    )
